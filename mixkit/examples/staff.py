##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
An org chart showing why mixins are needed.

Every `Person` can be a `Manager` or a `Worker`, and both kinds of staff can
report to a manager. A `MiddleManager` is a manager who also reports to one.
Single inheritance cannot give `Worker`, `Manager` and `MiddleManager` the same
"has a manager" behavior without also giving it to every `Person`, so the
behavior lives in bundles that are composed onto exactly the classes that need it.
"""

import logging
from typing import List

from mixkit.bundle import BehaviorBundle
from mixkit.composer import mixin


LOG = logging.getLogger("mixkit")


class HasManager:
    """
    Lets staff report to a manager.

    Assumptions:
        - The receiver may have a `manager` field; a missing one means no manager.
        - A manager provides `add_report` and `remove_report`.
    """

    def set_manager(self, manager):
        """
        Report to a new manager, leaving the previous one.

        Args:
            manager: The new manager.
        """
        current = getattr(self, "manager", None)
        if current is not None:
            current.remove_report(self)
        self.manager = manager
        manager.add_report(self)

    def remove_manager(self):
        """Stop reporting to the current manager, if any."""
        current = getattr(self, "manager", None)
        if current is None:
            return
        current.remove_report(self)
        self.manager = None


class HasReports:
    """
    Lets staff keep a list of direct reports.

    Assumptions:
        - The receiver has a `reports` list.
    """

    def add_report(self, report):
        if report not in self.reports:
            self.reports.append(report)

    def remove_report(self, report):
        if report in self.reports:
            self.reports.remove(report)

    def get_reports(self) -> List:
        return list(self.reports)


HAS_MANAGER = BehaviorBundle.from_class(HasManager, name="has_manager")
HAS_REPORTS = BehaviorBundle.from_class(HasReports, name="has_reports", requires=("reports",))


class Person:
    """Anyone in the org chart."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@mixin(HAS_REPORTS)
class Manager(Person):
    """A person with direct reports."""

    def __init__(self, name: str):
        super().__init__(name)
        self.reports = []


@mixin(HAS_MANAGER)
class Worker(Person):
    """A person who reports to a manager."""

    def __init__(self, name: str, manager: Manager = None):
        super().__init__(name)
        self.manager = None
        if manager is not None:
            self.set_manager(manager)


@mixin(HAS_MANAGER)
class MiddleManager(Manager):
    """A manager who also reports to a manager."""

    def __init__(self, name: str, manager: Manager = None):
        super().__init__(name)
        self.manager = None
        if manager is not None:
            self.set_manager(manager)


def chain_of_command(person: Person) -> List[Person]:
    """
    Walk up from `person` through each manager.

    Args:
        person: Where to start.

    Returns:
        `person` followed by every manager above it, nearest first.
    """
    chain = [person]
    current = getattr(person, "manager", None)
    while current is not None and current not in chain:
        chain.append(current)
        current = getattr(current, "manager", None)
    LOG.debug(f"Chain of command for {person!r}: {chain}")
    return chain
