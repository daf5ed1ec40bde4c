##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Behavior bundles for capability composition.

This module defines `BehaviorBundle`, the immutable value that holds a named
set of operations (a mixin) to be copied onto composition targets. Bundles can
be built directly from a mapping of names to callables or harvested from a
plain mixin class with `BehaviorBundle.from_class`.
"""

import inspect
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Tuple


LOG = logging.getLogger("mixkit")

OPERATION_DESCRIPTORS = (staticmethod, classmethod)


def is_operation(value: Any) -> bool:
    """
    Check whether a value can be stored in a bundle as an operation.

    Args:
        value: The candidate operation.

    Returns:
        True if `value` is callable or is a `staticmethod`/`classmethod` wrapper.
    """
    return callable(value) or isinstance(value, OPERATION_DESCRIPTORS)


class BehaviorBundle(Mapping):
    """
    An immutable, named mapping of operation names to operations.

    Plain functions stored in a bundle receive the object they are attached to
    as their first argument once composed onto a target, just like methods
    defined in a class body.

    Attributes:
        name (str): A label for the bundle, used in logs and error messages.
        requires (Tuple[str, ...]): Fields or operations the receiver must
            provide for the bundle's operations to work.
        description (str): Free-form description of the capability.

    Methods:
        from_class: Build a bundle from the operations defined on a mixin class.
        merge: Return a new bundle with other bundles layered on top of this one.
    """

    def __init__(
        self,
        name: str,
        operations: Mapping = None,
        requires: Iterable[str] = (),
        description: str = "",
    ):
        """
        Validate and freeze the operations of a new bundle.

        Args:
            name: A label for the bundle.
            operations: A mapping of operation names to callables. The bundle
                keeps its own copy so later changes to this mapping are not seen.
            requires: Names of fields or operations the receiver must provide.
            description: Free-form description of the capability.

        Raises:
            TypeError: If a name is not a string or an operation is not callable.
            ValueError: If a name is not a valid Python identifier.
        """
        entries: Dict[str, Callable] = {}
        for op_name, operation in (operations or {}).items():
            if not isinstance(op_name, str):
                raise TypeError(f"Operation names must be strings, got {type(op_name).__name__} in bundle '{name}'")
            if not op_name.isidentifier():
                raise ValueError(f"Operation name '{op_name}' in bundle '{name}' is not a valid identifier")
            if not is_operation(operation):
                raise TypeError(f"Operation '{op_name}' in bundle '{name}' is not callable")
            entries[op_name] = operation

        self._name = name
        self._operations = MappingProxyType(entries)
        self._requires = tuple(requires)
        self._description = description

    @classmethod
    def from_class(cls, mixin_class: type, name: str = None, requires: Iterable[str] = ()) -> "BehaviorBundle":
        """
        Harvest the public operations defined directly on a mixin class.

        Inherited attributes, private names (leading underscore) and
        non-callable class attributes are skipped.

        Args:
            mixin_class: The class whose body defines the operations.
            name: The bundle name. Defaults to the class name.
            requires: Names of fields or operations the receiver must provide.

        Returns:
            A new bundle holding the harvested operations.

        Raises:
            TypeError: If `mixin_class` is not a class.
        """
        if not isinstance(mixin_class, type):
            raise TypeError(f"Expected a class, got {type(mixin_class).__name__}")

        operations = {
            attr: value
            for attr, value in vars(mixin_class).items()
            if not attr.startswith("_")
            and (inspect.isfunction(value) or isinstance(value, OPERATION_DESCRIPTORS))
        }
        LOG.debug(f"Harvested {len(operations)} operations from class '{mixin_class.__name__}'")
        return cls(
            name or mixin_class.__name__,
            operations,
            requires=requires,
            description=inspect.getdoc(mixin_class) or "",
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def requires(self) -> Tuple[str, ...]:
        return self._requires

    @property
    def description(self) -> str:
        return self._description

    def merge(self, *others: Mapping, name: str = None) -> "BehaviorBundle":
        """
        Layer other bundles on top of this one without mutating any of them.

        Later bundles win on name collisions, matching composition order.

        Args:
            others: Bundles (or plain mappings) to layer on top of this bundle.
            name: Name for the merged bundle. Defaults to the joined names.

        Returns:
            A new bundle holding the merged operations.
        """
        operations = dict(self._operations)
        requires = list(self._requires)
        names = [self._name]
        for other in others:
            operations.update(other)
            for requirement in getattr(other, "requires", ()):
                if requirement not in requires:
                    requires.append(requirement)
            names.append(getattr(other, "name", type(other).__name__))
        return BehaviorBundle(name or "+".join(names), operations, requires=requires)

    def __getitem__(self, op_name: str) -> Callable:
        return self._operations[op_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        return f"BehaviorBundle(name={self._name!r}, operations={sorted(self._operations)!r})"
