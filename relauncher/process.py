"""Process descriptors and name lookup over a process snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessDescriptor:
    """A running process as seen in one snapshot of the process table."""

    name: str
    pid: int


def find_by_name(snapshot: Iterable[ProcessDescriptor], name: str) -> ProcessDescriptor | None:
    """Return the first process whose executable name matches ``name``.

    The comparison is case-insensitive and exact (no substring or glob
    matching). Ties are broken by snapshot order.

    Args:
        snapshot: Processes as returned by a controller.
        name: Executable name to look for, e.g. ``"Editor_x64.exe"``.

    Returns:
        The matching descriptor, or None if no process matches.
    """
    wanted = name.lower()
    for proc in snapshot:
        if proc.name.lower() == wanted:
            return proc
    return None
