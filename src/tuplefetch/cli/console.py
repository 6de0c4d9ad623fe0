from rich.console import Console
from rich.markup import escape

__all__ = [
    "console",
    "err_console",
    "print_error",
]

# standard console for stdout
console = Console()
"""Standard console for stdout."""

# error console for stderr
err_console = Console(stderr=True)
"""Error console for stderr."""


def print_error(message: str) -> None:
    """Print an error message to stderr with consistent styling."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)

