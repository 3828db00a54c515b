"""Platform detection and factory functions.

Platform-specific controllers are imported lazily so that a module for
one OS is never loaded on another.
"""

from __future__ import annotations

import sys

from relauncher.platform.interfaces import ProcessController


def detect_platform() -> str:
    """Detect the current operating system.

    Returns:
        ``"linux"``, ``"darwin"`` or ``"windows"``.

    Raises:
        RuntimeError: If the platform is unsupported.
    """
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform == "win32":
        return "windows"
    raise RuntimeError(f"Unsupported platform: {sys.platform}")


def create_process_controller(platform: str | None = None) -> ProcessController:
    """Create a platform-appropriate process controller.

    Args:
        platform: Override auto-detection (``"linux"``, ``"darwin"`` or
            ``"windows"``).

    Returns:
        A :class:`ProcessController` implementation.
    """
    platform = platform or detect_platform()

    if platform in ("linux", "darwin"):
        from relauncher.platform._posix_controller import PosixProcessController

        return PosixProcessController()

    if platform == "windows":
        from relauncher.platform.windows.controller import WindowsProcessController

        return WindowsProcessController()

    raise RuntimeError(f"Unsupported platform: {platform}")
