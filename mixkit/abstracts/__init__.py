##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
The `abstracts` package provides ABC classes that can be used throughout
Mixkit's codebase.

Modules:
    registry: Contains `BaseRegistry`, used to manage named, pluggable components.
"""

from mixkit.abstracts.registry import BaseRegistry


__all__ = ["BaseRegistry"]
