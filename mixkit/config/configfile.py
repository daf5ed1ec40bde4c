##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
This module provides functionality for locating and loading Mixkit
configuration files (`mixkit.yaml`).

It houses the `CONFIG` object that caches the loaded configuration.
"""
import logging
import os
from typing import Dict, Optional

from mixkit.config import ComposerConfig
from mixkit.exceptions import InvalidConfigError
from mixkit.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = "mixkit.yaml"
CONFIG_ENV_VAR: str = "MIXKIT_CONFIG"

CONFIG: Optional[ComposerConfig] = None


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the Mixkit configuration file (`mixkit.yaml`).

    If `path` is given it may point at the file itself or at a directory
    holding `mixkit.yaml`. Otherwise the following fallback sequence is used:
      1. The file named by the `MIXKIT_CONFIG` environment variable.
      2. `mixkit.yaml` in the current working directory.

    Args:
        path: A specific file or directory to look in.

    Returns:
        The full path to the configuration file if found, otherwise `None`.
    """
    if path is not None:
        if os.path.isdir(path):
            path = os.path.join(path, CONFIG_FILENAME)
        return path if os.path.isfile(path) else None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        if os.path.isfile(env_path):
            return env_path
        LOG.warning(f"{CONFIG_ENV_VAR} is set to '{env_path}' but no file exists there")

    local_config = os.path.join(os.getcwd(), CONFIG_FILENAME)
    if os.path.isfile(local_config):
        return local_config

    return None


def config_from_dict(config_dict: Dict) -> ComposerConfig:
    """
    Build a `ComposerConfig` from the contents of a configuration file.

    Unknown keys are logged and ignored.

    Args:
        config_dict: The parsed configuration, or `None` for defaults.

    Returns:
        The resulting configuration.

    Raises:
        InvalidConfigError: If the file contents are not a mapping or a value
            has the wrong type.
    """
    if config_dict is None:
        return ComposerConfig()
    if not isinstance(config_dict, dict):
        raise InvalidConfigError(f"Expected a mapping of settings, got {type(config_dict).__name__}")

    field_types = ComposerConfig.field_types()
    settings = {}
    for key, value in config_dict.items():
        if key not in field_types:
            LOG.warning(f"Ignoring unknown config setting '{key}'")
            continue
        expected = field_types[key]
        if not isinstance(value, expected):
            raise InvalidConfigError(
                f"Config setting '{key}' must be of type {expected.__name__}, got {type(value).__name__}"
            )
        settings[key] = value

    if "log_level" in settings:
        settings["log_level"] = settings["log_level"].upper()
        if not isinstance(logging.getLevelName(settings["log_level"]), int):
            raise InvalidConfigError(f"Unknown log level '{config_dict['log_level']}'")

    return ComposerConfig(**settings)


def load_composer_config(path: str = None, reload: bool = False) -> ComposerConfig:
    """
    Load the composer configuration, caching it in `CONFIG`.

    Args:
        path: A specific file or directory to look in. See `find_config_file`.
        reload: If True, ignore any cached configuration.

    Returns:
        The loaded configuration, or the defaults if no file is found.
    """
    global CONFIG  # pylint: disable=global-statement
    if CONFIG is not None and not reload and path is None:
        return CONFIG

    filepath = find_config_file(path)
    if filepath is None:
        LOG.debug("No mixkit config file found; using defaults")
        config = ComposerConfig()
    else:
        LOG.info(f"Reading mixkit config from file {filepath}")
        config = config_from_dict(load_yaml(filepath))

    CONFIG = config
    return CONFIG
