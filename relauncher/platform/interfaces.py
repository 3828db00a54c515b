"""Platform-agnostic protocol for process management.

The protocol uses structural subtyping so that fakes in tests and the
psutil-backed controllers satisfy it without inheriting from it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from relauncher.process import ProcessDescriptor


@runtime_checkable
class ProcessController(Protocol):
    """OS boundary used by :class:`~relauncher.replacer.ProcessReplacer`.

    Implementations raise :class:`~relauncher.exceptions.EnumerationError`,
    :class:`~relauncher.exceptions.TerminationError` and
    :class:`~relauncher.exceptions.LaunchError` respectively.
    """

    def list_processes(self) -> list[ProcessDescriptor]:
        """Snapshot every running process (name and PID)."""
        ...

    def terminate(self, pid: int) -> None:
        """Request a forceful kill of ``pid`` without waiting for exit."""
        ...

    def spawn(self, executable_path: str) -> int:
        """Start a detached process and return its PID."""
        ...
