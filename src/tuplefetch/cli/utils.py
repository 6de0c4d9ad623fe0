import json
from typing import Any

import typer
from pydantic import ValidationError

from tuplefetch.cli.console import err_console

__all__ = ["handle_validation_error", "parse_headers", "parse_json_body"]


def handle_validation_error(e: ValidationError, title: str = "Invalid request options") -> None:
    err_console.print(f"[bold red]{title}:[/bold red]")
    for error in e.errors():
        field_name = ".".join(str(loc) for loc in error["loc"]) or "options"
        message = error["msg"]
        input_value = error.get("input")
        err_console.print(
            f"  Field [bold]{field_name}[/bold]: {message} "
            f"(Invalid Value: [red]{input_value!r}[/red])"
        )


def parse_headers(values: list[str] | None) -> dict[str, str] | None:
    """Turn repeated ``Name: value`` options into a header mapping."""
    if not values:
        return None
    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected 'Name: value', got {raw!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


def parse_json_body(value: str | None) -> Any:
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Not valid JSON: {e}", param_hint="--json") from e
