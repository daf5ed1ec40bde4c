##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Tests for the `staff.py` module of the `examples/` directory.
"""

from types import SimpleNamespace

from pytest_mock import MockerFixture

from mixkit import compose, has_capability, missing_requirements
from mixkit.examples.staff import (
    HAS_MANAGER,
    HAS_REPORTS,
    Manager,
    MiddleManager,
    Person,
    Worker,
    chain_of_command,
)


class TestHasManagerBundle:
    """Tests for composing `HAS_MANAGER` onto a bare object."""

    def test_set_manager_on_empty_target(self, mocker: MockerFixture):
        """
        Test that `set_manager` records the manager and registers the target as a report.

        Args:
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        target = compose(SimpleNamespace(), [HAS_MANAGER])
        manager = mocker.Mock()

        target.set_manager(manager)

        assert target.manager is manager
        manager.add_report.assert_called_once_with(target)
        manager.remove_report.assert_not_called()

    def test_set_manager_leaves_previous_manager(self, mocker: MockerFixture):
        """
        Test that switching managers removes the target from the old manager's reports.

        Args:
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        target = compose(SimpleNamespace(), [HAS_MANAGER])
        old, new = mocker.Mock(), mocker.Mock()

        target.set_manager(old)
        target.set_manager(new)

        old.remove_report.assert_called_once_with(target)
        new.add_report.assert_called_once_with(target)
        assert target.manager is new

    def test_remove_manager(self, mocker: MockerFixture):
        """
        Test that `remove_manager` clears the manager and notifies it.

        Args:
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        target = compose(SimpleNamespace(), [HAS_MANAGER])
        manager = mocker.Mock()
        target.set_manager(manager)

        target.remove_manager()

        assert target.manager is None
        manager.remove_report.assert_called_once_with(target)

    def test_remove_manager_without_one(self):
        """Test that removing a manager that was never set is a no-op."""
        target = compose(SimpleNamespace(), [HAS_MANAGER])
        target.remove_manager()
        assert not hasattr(target, "manager")


class TestOrgChart:
    """Tests for the Person/Manager/Worker/MiddleManager classes."""

    def test_capabilities_are_selective(self):
        """Test that only the classes that need a capability receive it."""
        assert not has_capability(Person("pat"), HAS_MANAGER)
        assert not has_capability(Person("pat"), HAS_REPORTS)
        assert has_capability(Worker("wes"), HAS_MANAGER)
        assert not has_capability(Worker("wes"), HAS_REPORTS)
        assert has_capability(Manager("meg"), HAS_REPORTS)
        assert not has_capability(Manager("meg"), HAS_MANAGER)
        assert has_capability(MiddleManager("max"), HAS_MANAGER)
        assert has_capability(MiddleManager("max"), HAS_REPORTS)

    def test_requirements_met(self):
        """Test that staff with reports have the `reports` field the bundle needs."""
        assert missing_requirements(Manager("meg"), HAS_REPORTS) == []
        assert missing_requirements(Worker("wes"), HAS_REPORTS) == ["reports"]

    def test_worker_reports_to_manager(self):
        """Test that a worker created with a manager appears in its reports."""
        boss = Manager("meg")
        worker = Worker("wes", manager=boss)
        assert worker.manager is boss
        assert boss.get_reports() == [worker]

    def test_middle_manager(self):
        """Test that a middle manager both reports to a manager and has reports."""
        boss = Manager("meg")
        middle = MiddleManager("max", manager=boss)
        worker = Worker("wes", manager=middle)

        assert boss.get_reports() == [middle]
        assert middle.get_reports() == [worker]
        assert chain_of_command(worker) == [worker, middle, boss]

    def test_reassigning_worker(self):
        """Test that moving a worker between managers updates both report lists."""
        first, second = Manager("ann"), Manager("bea")
        worker = Worker("cal", manager=first)

        worker.set_manager(second)

        assert first.get_reports() == []
        assert second.get_reports() == [worker]

    def test_removing_manager(self):
        """Test that removing the manager clears both sides of the relationship."""
        boss = Manager("meg")
        worker = Worker("wes", manager=boss)

        worker.remove_manager()

        assert worker.manager is None
        assert boss.get_reports() == []
        assert chain_of_command(worker) == [worker]

    def test_repr(self):
        """Test that people render with their class and name."""
        assert repr(MiddleManager("max")) == "MiddleManager('max')"
