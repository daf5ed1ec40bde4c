##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Capability composition.

This module copies the operations of one or more behavior bundles onto a
target, which may be a class (its shared operation table) or an instance.
Bundles are applied in order and a later bundle overrides an earlier one when
both define the same name. The copy is flat: nothing is looked up through, or
added to, the target's inheritance chain.

Composition mutates the target in place and is not thread-safe. Compose onto a
target before sharing it with other threads.
"""

import inspect
import logging
from collections.abc import Mapping
from types import MethodType
from typing import Any, Callable, Iterable, List

from mixkit.bundle import BehaviorBundle
from mixkit.config import ComposerConfig
from mixkit.exceptions import InvalidTargetError


LOG = logging.getLogger("mixkit")

PROBE_ATTRIBUTE = "__mixkit_probe__"
OPERATIONS_ATTRIBUTE = "__mixkit_operations__"
_MISSING = object()


def describe_target(target: Any) -> str:
    """
    Build a short human readable label for a target, used in log messages.

    Args:
        target: The composition target.

    Returns:
        A label like `class Manager` or `Manager instance`.
    """
    if isinstance(target, type):
        return f"class {target.__name__}"
    return f"{type(target).__name__} instance"


def validate_target(target: Any):
    """
    Ensure a target can accept new attribute bindings without modifying it.

    A probe attribute is written and removed again, which rejects `None`,
    primitives, built-in types, frozen dataclasses and `__slots__` instances
    without an attribute dictionary.

    Args:
        target: The composition target.

    Raises:
        InvalidTargetError: If the target cannot hold operations.
    """
    if target is None:
        raise InvalidTargetError(target, "target is None")

    try:
        setattr(target, PROBE_ATTRIBUTE, None)
    except (AttributeError, TypeError) as exc:
        raise InvalidTargetError(target, str(exc)) from exc

    try:
        delattr(target, PROBE_ATTRIBUTE)
    except (AttributeError, TypeError) as exc:
        raise InvalidTargetError(target, f"attributes cannot be removed: {exc}") from exc


def bind_operation(target: Any, operation: Callable) -> Callable:
    """
    Prepare an operation for storage on a target.

    Classes receive the operation unchanged so the descriptor protocol turns
    functions into methods on lookup. Instances receive the operation bound to
    themselves so that calling it passes the instance as the receiver.

    Args:
        target: The composition target.
        operation: The operation taken from a bundle.

    Returns:
        The value to store on the target.
    """
    if isinstance(target, type):
        return operation
    if hasattr(type(operation), "__get__"):
        return operation.__get__(target, type(target))
    return operation


def own_namespace(target: Any) -> Mapping:
    """
    Get the attribute dictionary of a target, or an empty mapping if it has none.

    Args:
        target: The composition target.

    Returns:
        The target's own namespace.
    """
    try:
        return vars(target)
    except TypeError:
        return {}


def is_bound(target: Any, name: str) -> bool:
    """
    Check whether `name` resolves on a target without running any getters.

    Args:
        target: The composition target.
        name: The attribute name.

    Returns:
        True if an attribute named `name` exists on the target or its class.
    """
    return inspect.getattr_static(target, name, _MISSING) is not _MISSING


def roll_back(target: Any, previous: List[tuple]):
    """
    Restore the bindings a failed composition replaced, newest first.

    Args:
        target: The composition target.
        previous: `(name, value)` pairs recorded before each write, where
            `value` is `_MISSING` if the name was not in the target's own namespace.
    """
    for op_name, value in reversed(previous):
        if value is _MISSING:
            delattr(target, op_name)
        else:
            setattr(target, op_name, value)


def operation_of(target: Any, name: str) -> Callable:
    """
    Get the raw operation stored on a target under `name`.

    Operations bound to an instance by composition are mapped back to the
    bundle entry they were created from (including `staticmethod` and
    `classmethod` wrappers), so the result can be compared against the
    operations of a bundle.

    Args:
        target: The composition target.
        name: The operation name.

    Returns:
        The operation bound under `name`.

    Raises:
        AttributeError: If nothing is bound under `name`.
    """
    try:
        value = vars(target)[name]
    except (TypeError, KeyError):
        value = getattr(target, name)

    operation, bound = own_namespace(target).get(OPERATIONS_ATTRIBUTE, {}).get(name, (_MISSING, _MISSING))
    if bound is value:
        return operation

    if isinstance(value, MethodType) and value.__self__ is target:
        return value.__func__
    return value


def has_capability(target: Any, bundle: Mapping) -> bool:
    """
    Check whether every operation of a bundle resolves on a target.

    Normal attribute lookup is used, so inherited operations count.

    Args:
        target: The object or class to inspect.
        bundle: The bundle describing the capability.

    Returns:
        True if the target provides every name in the bundle.
    """
    return all(hasattr(target, op_name) for op_name in bundle)


def missing_requirements(target: Any, bundle: Mapping) -> List[str]:
    """
    List the receiver requirements of a bundle that a target does not provide.

    Fields assigned in `__init__` only exist on instances, so pass an instance
    rather than its class to check them.

    Args:
        target: The object or class to inspect.
        bundle: The bundle whose `requires` names are checked.

    Returns:
        The missing names, in the order the bundle lists them.
    """
    return [requirement for requirement in getattr(bundle, "requires", ()) if not hasattr(target, requirement)]


def as_bundles(bundles: Iterable[Mapping]) -> List[BehaviorBundle]:
    """
    Materialize a sequence of bundles, wrapping plain mappings.

    Args:
        bundles: Bundles or plain mappings of names to operations.

    Returns:
        A list of `BehaviorBundle` objects in the original order.

    Raises:
        TypeError: If an entry is not a mapping or holds a non-callable.
    """
    result = []
    for index, bundle in enumerate(bundles):
        if isinstance(bundle, BehaviorBundle):
            result.append(bundle)
        elif isinstance(bundle, Mapping):
            result.append(BehaviorBundle(f"bundle[{index}]", bundle))
        else:
            raise TypeError(f"Expected a mapping of operations at position {index}, got {type(bundle).__name__}")
    return result


class CapabilityComposer:
    """
    Copies the operations of behavior bundles onto targets.

    Attributes:
        config (ComposerConfig): Settings controlling how composition is reported.

    Methods:
        from_config_file: Build a composer from a `mixkit.yaml` file.
        compose: Apply bundles to a target, later bundles winning on collisions.
    """

    def __init__(self, config: ComposerConfig = None):
        """
        Args:
            config: Composer settings. Defaults to `ComposerConfig()`.
        """
        self.config = config if config is not None else ComposerConfig()

    @classmethod
    def from_config_file(cls, path: str = None) -> "CapabilityComposer":
        """
        Build a composer using settings from a `mixkit.yaml` file.

        Args:
            path: A specific file or directory to look in. When omitted the
                usual search order of `find_config_file` applies.

        Returns:
            A new composer.
        """
        from mixkit.config.configfile import load_composer_config  # pylint: disable=C0415

        return cls(load_composer_config(path))

    def compose(self, target: Any, bundles: Iterable[Mapping] = ()) -> Any:
        """
        Copy every operation of every bundle onto `target`, in order.

        An existing binding with the same name is overwritten whether it was
        on the target beforehand or came from an earlier bundle in this call.
        Bindings not named by any bundle are left alone.

        Args:
            target: A class or an instance with a writable attribute namespace.
            bundles: An ordered sequence of bundles. May be empty.

        Returns:
            The same `target`, mutated in place.

        Raises:
            InvalidTargetError: If the target cannot hold operations, including
                when a single name cannot be bound (e.g. a read-only property).
                The target is restored to its prior state when this is raised.
        """
        bundles = as_bundles(bundles)
        validate_target(target)

        label = describe_target(target)
        override_level = logging.INFO if self.config.report_overrides else logging.DEBUG
        is_instance = not isinstance(target, type)
        previous = []
        record = {}
        for bundle in bundles:
            LOG.debug(f"Applying bundle '{bundle.name}' ({len(bundle)} operations) to {label}")
            for op_name, operation in bundle.items():
                if is_bound(target, op_name):
                    LOG.log(override_level, f"Overriding '{op_name}' on {label} with bundle '{bundle.name}'")
                bound = bind_operation(target, operation)
                prior = own_namespace(target).get(op_name, _MISSING)
                try:
                    setattr(target, op_name, bound)
                except (AttributeError, TypeError) as exc:
                    roll_back(target, previous)
                    raise InvalidTargetError(target, f"cannot bind '{op_name}': {exc}") from exc
                previous.append((op_name, prior))
                record[op_name] = (operation, bound)

        if is_instance and record:
            existing = own_namespace(target).get(OPERATIONS_ATTRIBUTE, {})
            setattr(target, OPERATIONS_ATTRIBUTE, {**existing, **record})

        return target


DEFAULT_COMPOSER = CapabilityComposer()


def compose(target: Any, bundles: Iterable[Mapping] = ()) -> Any:
    """
    Copy the operations of `bundles` onto `target` using the default composer.

    See `CapabilityComposer.compose`.

    Args:
        target: A class or an instance with a writable attribute namespace.
        bundles: An ordered sequence of bundles. May be empty.

    Returns:
        The same `target`, mutated in place.

    Raises:
        InvalidTargetError: If the target cannot hold operations.
    """
    return DEFAULT_COMPOSER.compose(target, bundles)


def mixin(*bundles: Mapping) -> Callable[[type], type]:
    """
    Class decorator that composes bundles onto the decorated class.

    Example:
        ```python
        @mixin(HAS_MANAGER)
        class Worker(Person):
            ...
        ```

    Args:
        bundles: The bundles to apply, in order.

    Returns:
        A decorator returning the same class with the operations bound.
    """

    def decorator(cls: type) -> type:
        return compose(cls, bundles)

    return decorator
