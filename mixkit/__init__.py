##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Mixkit: capability composition for Python objects.

This package copies named bundles of behavior (mixins) onto classes and
instances so that unrelated hierarchies can share cross-cutting operations.
"""

import os

from mixkit.bundle import BehaviorBundle
from mixkit.composer import CapabilityComposer, compose, has_capability, missing_requirements, mixin, operation_of
from mixkit.exceptions import InvalidTargetError


__version__ = "1.0.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")

__all__ = [
    "BehaviorBundle",
    "CapabilityComposer",
    "InvalidTargetError",
    "compose",
    "has_capability",
    "missing_requirements",
    "mixin",
    "operation_of",
]
