##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Base registry class for managing named, pluggable components in Mixkit.

This module defines an abstract `BaseRegistry` class that provides reusable
infrastructure for registering, discovering, and looking up components by
name. It supports alias resolution, entry-point-based plugin discovery, and
runtime introspection of registered components.

Subclasses must define how to register built-in components, validate
components, and identify the appropriate entry point group for plugin discovery.
"""

import logging
from abc import ABC, abstractmethod
from importlib.metadata import entry_points
from typing import Any, Dict, List


LOG = logging.getLogger("mixkit")


class BaseRegistry(ABC):
    """
    Abstract base registry for managing and looking up named components.

    This class provides the infrastructure for:
    - Registering components and their aliases
    - Discovering plugins via Python entry points
    - Retrieving registered components by name or alias
    - Listing and introspecting available components

    Subclasses are required to:
        - Implement `_register_builtins()` to register default components
        - Implement `_validate_component()` to enforce type constraints
        - Define `_entry_point_group()` to identify the entry point namespace for discovery

    Attributes:
        _registry (Dict[str, Any]): Maps canonical component names to components.
        _aliases (Dict[str, str]): Maps alias names to canonical component names.

    Methods:
        register: Register a new component and its optional aliases.
        list_available: Return a list of all registered component names.
        get: Retrieve a registered component by name or alias.
        get_component_info: Return introspection metadata for a registered component.
    """

    def __init__(self):
        # Map canonical names to components
        self._registry: Dict[str, Any] = {}

        # Map aliases to canonical names
        self._aliases: Dict[str, str] = {}

        self._plugins_discovered = False
        self._register_builtins()

    @abstractmethod
    def _register_builtins(self):
        """
        Register built-in components.

        Subclasses must implement this to register relevant components.
        """
        raise NotImplementedError("Subclasses of `BaseRegistry` must implement a `_register_builtins` method.")

    @abstractmethod
    def _validate_component(self, component: Any):
        """
        Validate a component before registration.

        Args:
            component: The component to validate.

        Raises:
            TypeError: If `component` is not valid.
        """
        raise NotImplementedError("Subclasses of `BaseRegistry` must implement a `_validate_component` method.")

    @abstractmethod
    def _entry_point_group(self) -> str:
        """
        Return the entry point group used for plugin discovery.

        Returns:
            The entry point group used for plugin discovery.
        """
        raise NotImplementedError("Subclasses must define an entry point group.")

    def _discover_plugins(self):
        """
        Discover and register plugins via Python entry points.

        Discovery runs once per registry. A plugin that fails to load is
        logged and skipped.
        """
        if self._plugins_discovered:
            return
        self._plugins_discovered = True

        for entry_point in entry_points(group=self._entry_point_group()):
            try:
                plugin = entry_point.load()
                self.register(entry_point.name, plugin)
                LOG.info(f"Loaded plugin via entry point: {entry_point.name}")
            except Exception as e:  # pylint: disable=broad-exception-caught
                LOG.warning(f"Failed to load plugin '{entry_point.name}': {e}")

    def _raise_component_error(self, msg: str):
        """
        Raise an appropriate exception when an unknown component is requested.

        Subclasses should override this to raise more specific exceptions.

        Args:
            msg: The message to add to the error being raised.

        Raises:
            ValueError: By default.
        """
        raise ValueError(msg)

    def register(self, name: str, component: Any, aliases: List[str] = None) -> None:
        """
        Register a new component.

        Args:
            name: Canonical name for the component.
            component: The component to register.
            aliases: Optional alternative names for this component.

        Raises:
            TypeError: If the component fails validation.
        """
        self._validate_component(component)

        self._registry[name] = component
        LOG.debug(f"Registered component: {name}")

        if aliases:
            for alias in aliases:
                self._aliases[alias] = name
                LOG.debug(f"Registered alias '{alias}' for component '{name}'")

    def list_available(self) -> List[str]:
        """
        Return a list of registered component names.

        This includes both built-in and discovered components.

        Returns:
            A list of canonical names for all available components.
        """
        self._discover_plugins()
        return list(self._registry.keys())

    def resolve(self, name: str) -> str:
        """
        Map a name or alias to its canonical name.

        Args:
            name: A canonical name or alias.

        Returns:
            The canonical name.
        """
        return self._aliases.get(name, name)

    def get(self, name: str) -> Any:
        """
        Retrieve a registered component by its name or alias.

        Plugin discovery runs before giving up on an unknown name.

        Args:
            name: The canonical name or alias of the component.

        Returns:
            The registered component.

        Raises:
            Exception: The result of `_raise_component_error` if the component is not registered.
        """
        canonical_name = self.resolve(name)
        if canonical_name not in self._registry:
            self._discover_plugins()

        component = self._registry.get(canonical_name)
        if component is None:
            available = ", ".join(self.list_available())
            self._raise_component_error(f"Component '{name}' is not supported. Available components: {available}")

        return component

    def get_component_info(self, name: str) -> Dict:
        """
        Get introspection information about a registered component.

        Args:
            name: The canonical name or alias of the component.

        Returns:
            Dictionary containing metadata such as name, type, and description.
        """
        component = self.get(name)
        return {
            "name": self.resolve(name),
            "type": type(component).__name__,
            "description": getattr(component, "__doc__", None) or "No description available",
        }
