##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Example capabilities built with Mixkit.

Modules:
    staff.py: A small org chart where managers and workers share the
        "has a manager" capability without sharing a base class for it.
"""
