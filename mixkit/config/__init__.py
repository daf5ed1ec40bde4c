##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Used to store the composer configuration.

The `config` package holds the settings that tune how composition is reported
and how logging is set up. The settings can be created directly or loaded
from a `mixkit.yaml` file.

Modules:
    configfile.py: Locates and loads `mixkit.yaml` files into a `ComposerConfig`.
"""
from dataclasses import dataclass, fields
from typing import Dict


@dataclass
class ComposerConfig:
    """
    Settings for a `CapabilityComposer`.

    Attributes:
        report_overrides: If True, replacing an existing binding on a target is
            logged at INFO level instead of DEBUG.
        log_level: The level to hand to `setup_logging`.
        colors: If True, `setup_logging` installs colored logs.
    """

    report_overrides: bool = False
    log_level: str = "INFO"
    colors: bool = True

    @classmethod
    def field_types(cls) -> Dict[str, type]:
        """
        Map each setting name to the type its value must have.

        Returns:
            A dict of setting names to types.
        """
        return {field.name: field.type for field in fields(cls)}
