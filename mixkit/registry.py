##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Registry of named behavior bundles.

This module defines `BundleRegistry`, which catalogs bundles under canonical
names and aliases so that they can be composed by name. Third-party packages
can contribute bundles through the `mixkit.bundles` entry point group.
"""

from typing import Any, Dict, Iterable

from mixkit.abstracts import BaseRegistry
from mixkit.bundle import BehaviorBundle
from mixkit.composer import compose
from mixkit.exceptions import UnknownBundleError


class BundleRegistry(BaseRegistry):
    """
    Registry for `BehaviorBundle` objects.

    Built-in bundles are the example org chart capabilities, `has_manager`
    and `has_reports`.

    Methods:
        compose: Look up bundles by name and compose them onto a target.
    """

    def _register_builtins(self):
        """
        Register the bundles that ship with Mixkit.
        """
        from mixkit.examples.staff import HAS_MANAGER, HAS_REPORTS  # pylint: disable=C0415

        self.register(HAS_MANAGER.name, HAS_MANAGER, aliases=["manager"])
        self.register(HAS_REPORTS.name, HAS_REPORTS, aliases=["reports"])

    def _validate_component(self, component: Any):
        """
        Ensure only behavior bundles are registered.

        Args:
            component: The object being registered.

        Raises:
            TypeError: If `component` is not a `BehaviorBundle`.
        """
        if not isinstance(component, BehaviorBundle):
            raise TypeError(f"{component!r} must be a BehaviorBundle")

    def _entry_point_group(self) -> str:
        """
        Entry point group used for discovering bundle plugins.

        Returns:
            The entry point namespace for Mixkit bundle plugins.
        """
        return "mixkit.bundles"

    def _raise_component_error(self, msg: str):
        """
        Raise an `UnknownBundleError` for names that are not registered.

        Args:
            msg: The message to add to the error being raised.

        Raises:
            UnknownBundleError: Always.
        """
        raise UnknownBundleError(msg)

    def get_component_info(self, name: str) -> Dict:
        """
        Get introspection information about a registered bundle.

        Args:
            name: The canonical name or alias of the bundle.

        Returns:
            Dictionary with the bundle's name, operations, requirements and description.
        """
        bundle = self.get(name)
        return {
            "name": self.resolve(name),
            "operations": sorted(bundle),
            "requires": list(bundle.requires),
            "description": bundle.description or "No description available",
        }

    def compose(self, target: Any, names: Iterable[str]) -> Any:
        """
        Compose registered bundles onto a target, in the order named.

        Every name is resolved before anything is applied, so an unknown name
        leaves the target untouched.

        Args:
            target: A class or an instance with a writable attribute namespace.
            names: Bundle names or aliases.

        Returns:
            The same `target`, mutated in place.

        Raises:
            UnknownBundleError: If a name is not registered.
            InvalidTargetError: If the target cannot hold operations.
        """
        bundles = [self.get(name) for name in names]
        return compose(target, bundles)


bundle_registry = BundleRegistry()
