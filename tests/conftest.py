##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import logging

import pytest

from mixkit.bundle import BehaviorBundle
from mixkit.config import configfile
from tests.fixture_types import FixtureBundle, FixtureModification, FixtureType


# pylint: disable=redefined-outer-name


def greet(self):
    """Operation that reads a field from its receiver."""
    return f"hello from {self.name}"


def wave(self, times=1):
    """Operation that takes an argument."""
    return "wave " * times


def greet_loudly(self):
    """Operation that collides with `greet`."""
    return f"HELLO FROM {self.name.upper()}"


def rename(self, name):
    """Operation that writes a field on its receiver."""
    self.name = name


@pytest.fixture
def greeting_bundle() -> FixtureBundle:
    """
    A bundle with two operations, `greet` and `wave`.

    Returns:
        A `BehaviorBundle` named "greeting".
    """
    return BehaviorBundle("greeting", {"greet": greet, "wave": wave})


@pytest.fixture
def loud_bundle() -> FixtureBundle:
    """
    A bundle whose `greet` collides with `greeting_bundle`, plus `rename`.

    Returns:
        A `BehaviorBundle` named "loud".
    """
    return BehaviorBundle("loud", {"greet": greet_loudly, "rename": rename})


@pytest.fixture
def target_class() -> FixtureType:
    """
    A fresh class to compose onto. A new class is built for every test so
    composition never leaks between tests.

    Returns:
        A class with a `name` field and an existing `describe` method.
    """

    class Target:
        def __init__(self, name="target"):
            self.name = name

        def describe(self):
            return f"target named {self.name}"

    return Target


@pytest.fixture(autouse=True)
def reset_config() -> FixtureModification:
    """
    Clear the cached configuration before and after each test.
    """
    configfile.CONFIG = None
    yield
    configfile.CONFIG = None


@pytest.fixture
def mixkit_logger() -> logging.Logger:
    """
    The package logger, with handlers, level and propagation restored after the test.

    Returns:
        The "mixkit" logger.
    """
    logger = logging.getLogger("mixkit")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
