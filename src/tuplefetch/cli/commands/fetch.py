import asyncio
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from tuplefetch.cli.console import console, print_error
from tuplefetch.cli.utils import handle_validation_error, parse_headers, parse_json_body
from tuplefetch.handler import fetch_handler
from tuplefetch.logging import configure_logging
from tuplefetch.models.config import Config


def fetch_url(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="URL to request")],
    method: Annotated[str, typer.Option("--request", "-X", help="HTTP method")] = "GET",
    header: Annotated[
        list[str] | None, typer.Option("--header", "-H", help="Header as 'Name: value'")
    ] = None,
    data: Annotated[str | None, typer.Option("--data", "-d", help="Raw request body")] = None,
    json_body: Annotated[str | None, typer.Option("--json", help="JSON request body")] = None,
    timeout: Annotated[
        float | None, typer.Option("--timeout", help="Timeout in seconds for this request")
    ] = None,
) -> None:
    """
    Perform a single request and print the response payload.

    Exits with 1 when the request fails or the response is not ok.
    """
    options: dict[str, Any] = {"method": method}
    headers = parse_headers(header)
    if headers:
        options["headers"] = headers
    if data is not None:
        options["body"] = data
    if json_body is not None:
        options["json"] = parse_json_body(json_body)
    if timeout is not None:
        options["timeout"] = timeout

    try:
        config = Config()  # type: ignore[call-arg]
    except ValidationError as e:
        handle_validation_error(e, title="Invalid TUPLEFETCH_* configuration")
        raise typer.Exit(2) from e

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.log_level)

    try:
        payload, error = asyncio.run(fetch_handler(url, options, config=config))
    except ValidationError as e:
        handle_validation_error(e)
        raise typer.Exit(2) from e

    if error is not None:
        print_error(str(error))
        raise typer.Exit(1)

    if payload == "":
        console.print("[dim](empty response body)[/dim]")
    elif isinstance(payload, str):
        console.print(payload, markup=False, highlight=False)
    else:
        console.print_json(data=payload)
