##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Module of all Mixkit-specific exception types.
"""

__all__ = (
    "InvalidTargetError",
    "UnknownBundleError",
    "InvalidConfigError",
)


class InvalidTargetError(Exception):
    """
    Exception to signal that a composition target cannot hold
    operations (e.g. `None`, a primitive value, or a frozen object).
    """

    def __init__(self, target, reason: str = None):
        if isinstance(target, type):
            self.target_type = f"class {target.__name__}"
        else:
            self.target_type = type(target).__name__
        message = f"Cannot compose operations onto {self.target_type!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownBundleError(Exception):
    """
    Exception to signal that a bundle name or alias was not found
    in a registry.
    """


class InvalidConfigError(Exception):
    """
    Exception for configuration values that have the wrong type.
    """
