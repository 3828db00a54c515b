"""Terminal output using Rich.

Prints one line per step of a relaunch run: lookup, termination and
launch, or the reason the run was aborted.
"""

from datetime import datetime

from rich.console import Console
from rich.text import Text

from relauncher.replacer import RunReport


class TerminalUI:
    """Rich-based console reporter for relaunch runs.

    Usage::

        ui = TerminalUI()
        ui.print_report(replacer.run("Editor_x64.exe"))
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_report(self, report: RunReport) -> None:
        """Print the outcome of a run, one line per step."""
        if report.aborted:
            self.log(f"Could not list processes: {report.error}", style="bold red")
            self.log(f"{report.target} was not relaunched.", style="red")
            return

        if report.found is None:
            self.log(f"{report.target} is not running.", style="yellow")
        else:
            self.log(
                f"{report.found.name} found with PID {report.found.pid}. Terminating.",
                style="cyan",
            )
            if report.terminated:
                self.log(f"Termination requested for PID {report.found.pid}.", style="green")
            else:
                self.log(f"Error terminating process: {report.termination_error}", style="red")

        if report.launched:
            self.log(
                f"New instance of {report.launch_path} launched with PID {report.launched_pid}.",
                style="bold green",
            )
        else:
            self.log(f"Error launching {report.launch_path}: {report.error}", style="bold red")

    def log(self, message: str, style: str = "") -> None:
        """Print a timestamped status line."""
        text = Text()
        text.append(datetime.now().strftime("[%H:%M:%S] "), style="dim")
        text.append(message, style=style)
        self.console.print(text)
