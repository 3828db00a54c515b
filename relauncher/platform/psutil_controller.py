"""Process controller built on psutil and subprocess.

Enumeration and termination are identical on every platform. Only the
way a spawned process is detached from the launcher differs, which
subclasses provide through :meth:`PsutilProcessController._detach_kwargs`.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import psutil

from relauncher.exceptions import EnumerationError, LaunchError, TerminationError
from relauncher.process import ProcessDescriptor
from relauncher.utils.logging import get_logger

log = get_logger("platform.psutil_controller")


def resolve_executable(executable_path: str) -> str:
    """Resolve a launch path to an absolute executable path.

    A file relative to the current working directory wins; otherwise the
    name is looked up on ``PATH``.

    Raises:
        LaunchError: If the path resolves to nothing executable.
    """
    candidate = Path(os.path.expandvars(os.path.expanduser(executable_path)))
    if candidate.is_file():
        if not os.access(candidate, os.X_OK):
            raise LaunchError(f"Not executable: {candidate}")
        return str(candidate.resolve())

    found = shutil.which(executable_path)
    if found is None:
        raise LaunchError(f"Executable not found: {executable_path}")
    return found


class PsutilProcessController:
    """Lists, kills and spawns processes without going through a shell."""

    def list_processes(self) -> list[ProcessDescriptor]:
        """Snapshot all running processes.

        Processes whose name cannot be read (access denied, exited while
        iterating) are skipped.

        Raises:
            EnumerationError: If the process table itself cannot be read.
        """
        snapshot: list[ProcessDescriptor] = []
        try:
            for proc in psutil.process_iter(attrs=["pid", "name"]):
                name = proc.info.get("name")
                if not name:
                    continue
                snapshot.append(ProcessDescriptor(name=str(name), pid=proc.info["pid"]))
        except (psutil.Error, OSError) as e:
            raise EnumerationError(f"Cannot read process table: {e}") from e

        log.debug("Enumerated %d processes", len(snapshot))
        return snapshot

    def terminate(self, pid: int) -> None:
        """Send a forceful kill to ``pid``.

        Returns as soon as the request is accepted; the process may still
        be shutting down.

        Raises:
            TerminationError: If the process is gone or may not be killed.
        """
        try:
            psutil.Process(pid).kill()
        except psutil.NoSuchProcess as e:
            raise TerminationError(f"Process {pid} no longer exists") from e
        except psutil.AccessDenied as e:
            raise TerminationError(f"Permission denied killing process {pid}") from e
        except (psutil.Error, OSError) as e:
            raise TerminationError(f"Failed to kill process {pid}: {e}") from e

    def spawn(self, executable_path: str) -> int:
        """Start ``executable_path`` detached from this process.

        The child gets no standard streams from the launcher and is never
        waited on.

        Raises:
            LaunchError: If the executable cannot be resolved or started.
        """
        executable = resolve_executable(executable_path)
        try:
            child = subprocess.Popen(
                [executable],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
                **self._detach_kwargs(),
            )
        except OSError as e:
            raise LaunchError(f"Failed to start {executable}: {e}") from e

        log.debug("Spawned %s with PID %d", executable, child.pid)
        return child.pid

    def _detach_kwargs(self) -> dict:
        """Extra ``Popen`` keyword arguments that detach the child."""
        return {}
