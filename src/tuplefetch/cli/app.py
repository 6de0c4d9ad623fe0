"""CLI application using Typer."""

import sys

import typer

from tuplefetch.cli.commands.fetch import fetch_url
from tuplefetch.cli.console import print_error

__all__ = ["app", "main"]

app = typer.Typer(
    name="tuplefetch",
    help="Perform one HTTP request and report its payload or error.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    tuplefetch CLI entry point.
    """
    ctx.obj = {"verbose": verbose}


app.command(name="fetch")(fetch_url)


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except Exception as e:
        print_error(f"An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
