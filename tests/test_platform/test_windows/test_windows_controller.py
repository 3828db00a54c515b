"""Tests for the Windows controller's detached spawn."""

from unittest.mock import patch

from relauncher.platform.windows.controller import (
    CREATE_NEW_PROCESS_GROUP,
    DETACHED_PROCESS,
    WindowsProcessController,
)


def test_creation_flag_values():
    assert DETACHED_PROCESS == 0x00000008
    assert CREATE_NEW_PROCESS_GROUP == 0x00000200


def test_spawn_uses_detached_creation_flags():
    """The child gets no console and its own process group."""
    with (
        patch(
            "relauncher.platform.psutil_controller.resolve_executable",
            return_value=r"C:\Editor\Editor_x64.exe",
        ),
        patch("relauncher.platform.psutil_controller.subprocess.Popen") as mock_popen,
    ):
        mock_popen.return_value.pid = 1234
        assert WindowsProcessController().spawn("Editor_x64.exe") == 1234

    args, kwargs = mock_popen.call_args
    assert args == ([r"C:\Editor\Editor_x64.exe"],)
    assert kwargs["creationflags"] == DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
    assert "start_new_session" not in kwargs
