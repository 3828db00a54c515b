"""POSIX process controller: detaches children into a new session."""

from relauncher.platform.psutil_controller import PsutilProcessController


class PosixProcessController(PsutilProcessController):
    """Spawns children with ``setsid`` so they outlive the launcher.

    A new session also drops the controlling terminal, so closing the
    launcher's terminal does not send SIGHUP to the relaunched instance.
    """

    def _detach_kwargs(self) -> dict:
        return {"start_new_session": True}
