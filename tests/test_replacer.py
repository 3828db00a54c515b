"""Tests for ProcessReplacer (controller mocked)."""

from unittest.mock import MagicMock

import pytest

from relauncher.exceptions import EnumerationError, LaunchError, TerminationError
from relauncher.process import ProcessDescriptor
from relauncher.replacer import ProcessReplacer, RunReport

TARGET = "Editor_x64.exe"


def _make_controller(snapshot=None, spawn_pid=4242):
    """Create a mock controller returning the given snapshot."""
    controller = MagicMock()
    controller.list_processes.return_value = list(snapshot or [])
    controller.spawn.return_value = spawn_pid
    return controller


# ---------------------------------------------------------------------------
# run(): scenarios
# ---------------------------------------------------------------------------


class TestRun:
    def test_found_target_is_terminated_and_relaunched(self):
        """Running target is killed by PID, then the same name is launched."""
        controller = _make_controller([ProcessDescriptor("Editor_x64.exe", 100)])

        report = ProcessReplacer(controller).run(TARGET)

        controller.terminate.assert_called_once_with(100)
        controller.spawn.assert_called_once_with("Editor_x64.exe")
        assert report.found == ProcessDescriptor("Editor_x64.exe", 100)
        assert report.terminated is True
        assert report.launched_pid == 4242
        assert report.error is None

    def test_missing_target_is_launched_without_terminate(self):
        """No match: terminate is never called, launch still happens."""
        controller = _make_controller([ProcessDescriptor("notes.exe", 5)])

        report = ProcessReplacer(controller).run(TARGET)

        controller.terminate.assert_not_called()
        controller.spawn.assert_called_once_with("Editor_x64.exe")
        assert report.found is None
        assert report.terminated is None
        assert report.launched

    def test_rejected_termination_still_launches(self):
        """A failed kill is recorded but the launch goes ahead."""
        controller = _make_controller([ProcessDescriptor("Editor_x64.exe", 100)])
        controller.terminate.side_effect = TerminationError("Process 100 no longer exists")

        report = ProcessReplacer(controller).run(TARGET)

        controller.spawn.assert_called_once_with("Editor_x64.exe")
        assert report.terminated is False
        assert isinstance(report.termination_error, TerminationError)
        assert report.error is None
        assert report.launched

    def test_enumeration_failure_aborts_run(self):
        """Without a process table, neither terminate nor launch run."""
        controller = _make_controller()
        controller.list_processes.side_effect = EnumerationError("access denied")

        report = ProcessReplacer(controller).run(TARGET)

        controller.terminate.assert_not_called()
        controller.spawn.assert_not_called()
        assert report.aborted
        assert not report.launched

    def test_launch_failure_is_reported_not_raised(self):
        controller = _make_controller([ProcessDescriptor("Editor_x64.exe", 100)])
        controller.spawn.side_effect = LaunchError("Executable not found: Editor_x64.exe")

        report = ProcessReplacer(controller).run(TARGET)

        controller.terminate.assert_called_once_with(100)
        assert isinstance(report.error, LaunchError)
        assert not report.launched
        assert not report.aborted

    @pytest.mark.parametrize(
        "snapshot,terminate_error",
        [
            ([], None),
            ([ProcessDescriptor("Editor_x64.exe", 1)], None),
            ([ProcessDescriptor("Editor_x64.exe", 1)], TerminationError("gone")),
        ],
    )
    def test_launch_called_exactly_once(self, snapshot, terminate_error):
        controller = _make_controller(snapshot)
        controller.terminate.side_effect = terminate_error

        ProcessReplacer(controller).run(TARGET)

        assert controller.spawn.call_count == 1

    def test_matching_is_case_insensitive(self):
        controller = _make_controller([ProcessDescriptor("editor_x64.exe", 9)])

        ProcessReplacer(controller).run("EDITOR_X64.EXE")

        controller.terminate.assert_called_once_with(9)

    def test_launch_path_overrides_target_name(self):
        controller = _make_controller([ProcessDescriptor("Editor_x64.exe", 100)])

        report = ProcessReplacer(controller).run(TARGET, launch_path="/opt/editor/Editor_x64.exe")

        controller.spawn.assert_called_once_with("/opt/editor/Editor_x64.exe")
        assert report.launch_path == "/opt/editor/Editor_x64.exe"
        assert report.target == TARGET

    def test_order_is_list_terminate_spawn(self):
        controller = _make_controller([ProcessDescriptor("Editor_x64.exe", 100)])

        ProcessReplacer(controller).run(TARGET)

        called = [name for name, _args, _kwargs in controller.method_calls]
        assert called == ["list_processes", "terminate", "spawn"]


# ---------------------------------------------------------------------------
# Single operations
# ---------------------------------------------------------------------------


def test_terminate_returns_true_on_accepted_request():
    controller = _make_controller()
    assert ProcessReplacer(controller).terminate(100) is True
    controller.terminate.assert_called_once_with(100)


def test_terminate_swallows_termination_error(caplog):
    """A rejected kill returns False and is logged as a warning."""
    controller = _make_controller()
    controller.terminate.side_effect = TerminationError("Permission denied killing process 100")

    with caplog.at_level("WARNING", logger="relauncher"):
        assert ProcessReplacer(controller).terminate(100) is False

    assert "Permission denied" in caplog.text


def test_launch_propagates_launch_error():
    controller = _make_controller()
    controller.spawn.side_effect = LaunchError("nope")

    with pytest.raises(LaunchError, match="nope"):
        ProcessReplacer(controller).launch("missing.exe")


def test_list_processes_delegates_to_controller():
    snapshot = [ProcessDescriptor("a", 1)]
    controller = _make_controller(snapshot)
    assert ProcessReplacer(controller).list_processes() == snapshot


def test_find_by_name_is_exposed_on_replacer():
    snapshot = [ProcessDescriptor("a.exe", 1)]
    assert ProcessReplacer.find_by_name(snapshot, "A.EXE").pid == 1


def test_run_report_defaults():
    report = RunReport(target="a", launch_path="a")
    assert not report.launched
    assert not report.aborted
    assert report.terminated is None
