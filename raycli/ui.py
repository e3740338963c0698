from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: ray [your natural language command]"


def display_usage() -> None:
    """Print the one-line usage message."""
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)


def display_notice(message: str) -> None:
    """Print an informational message that is not part of the command output."""
    err_console.print(Text(message, style="dim"))


def display_command(command: str) -> None:
    """Show the command that is about to run."""
    console.print()
    console.print(Text("Executing the following command...", style="bold yellow"))
    # Written raw: rich would expand tabs and interpret [brackets].
    console.file.write(command + "\n")
    console.file.flush()
    console.print()


def display_error(prefix: str, error: Exception) -> None:
    """Print a pipeline failure."""
    err_console.print(Text.assemble((f"{prefix}: ", "bold red"), str(error)), soft_wrap=True)
