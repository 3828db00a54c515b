"""Windows process controller: detaches children via creation flags."""

import subprocess

from relauncher.platform.psutil_controller import PsutilProcessController

# Defined on subprocess only when running on Windows.
DETACHED_PROCESS = getattr(subprocess, "DETACHED_PROCESS", 0x00000008)
CREATE_NEW_PROCESS_GROUP = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)


class WindowsProcessController(PsutilProcessController):
    """Spawns children without a console and in their own process group.

    ``psutil.Process.kill`` maps to ``TerminateProcess`` here, the same
    forceful stop as ``Stop-Process -Force``.
    """

    def _detach_kwargs(self) -> dict:
        return {"creationflags": DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP}
