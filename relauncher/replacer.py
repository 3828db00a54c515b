"""Find a running executable, kill it and start a fresh instance.

The run is strictly sequential: snapshot, find, terminate (best-effort,
not awaited), launch. Launching while the old instance is still shutting
down is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

from relauncher.exceptions import EnumerationError, LaunchError, RelauncherError, TerminationError
from relauncher.platform.interfaces import ProcessController
from relauncher.process import ProcessDescriptor, find_by_name
from relauncher.utils.logging import get_logger

log = get_logger("replacer")


@dataclass
class RunReport:
    """Outcome of a single :meth:`ProcessReplacer.run`.

    ``terminated`` is None when there was nothing to terminate; a
    rejected kill is kept in ``termination_error``. ``error`` holds the
    failure that cost the run its launch (enumeration or launch).
    """

    target: str
    launch_path: str
    found: ProcessDescriptor | None = None
    terminated: bool | None = None
    termination_error: TerminationError | None = None
    launched_pid: int | None = None
    error: RelauncherError | None = None

    @property
    def launched(self) -> bool:
        return self.launched_pid is not None

    @property
    def aborted(self) -> bool:
        """True when the process table could not be read."""
        return isinstance(self.error, EnumerationError)


class ProcessReplacer:
    """Replaces a running process with a new instance of its executable.

    Args:
        controller: OS boundary used to list, kill and spawn processes.
    """

    find_by_name = staticmethod(find_by_name)

    def __init__(self, controller: ProcessController):
        self._controller = controller

    def list_processes(self) -> list[ProcessDescriptor]:
        """Snapshot all running processes.

        Raises:
            EnumerationError: If the process table cannot be read.
        """
        return self._controller.list_processes()

    def terminate(self, pid: int) -> bool:
        """Request a forceful kill of ``pid``.

        Returns:
            True if the request was accepted, False if it was rejected.
            A rejection is logged, never raised.
        """
        return self._request_kill(pid) is None

    def _request_kill(self, pid: int) -> TerminationError | None:
        try:
            self._controller.terminate(pid)
        except TerminationError as e:
            log.warning("Termination of PID %d failed: %s", pid, e)
            return e
        log.info("Termination of PID %d requested", pid)
        return None

    def launch(self, executable_path: str) -> int:
        """Start a detached instance of ``executable_path``.

        Raises:
            LaunchError: If the executable cannot be resolved or started.
        """
        pid = self._controller.spawn(executable_path)
        log.info("Launched %s with PID %d", executable_path, pid)
        return pid

    def run(self, target: str, launch_path: str | None = None) -> RunReport:
        """Replace the running ``target`` with a fresh instance.

        Args:
            target: Executable name to look for (case-insensitive).
            launch_path: Path to start; defaults to ``target``, resolved
                against the working directory and then ``PATH``.

        Returns:
            A :class:`RunReport`. Errors are recorded there, not raised.
        """
        report = RunReport(target=target, launch_path=launch_path or target)

        try:
            snapshot = self.list_processes()
        except EnumerationError as e:
            log.error("Cannot enumerate processes, aborting: %s", e)
            report.error = e
            return report

        report.found = self.find_by_name(snapshot, target)
        if report.found is None:
            log.info("%s is not running", target)
        else:
            log.info("%s found with PID %d", report.found.name, report.found.pid)
            report.termination_error = self._request_kill(report.found.pid)
            report.terminated = report.termination_error is None

        try:
            report.launched_pid = self.launch(report.launch_path)
        except LaunchError as e:
            log.error("Launching %s failed: %s", report.launch_path, e)
            report.error = e

        return report
