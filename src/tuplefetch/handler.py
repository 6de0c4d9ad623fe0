"""
Single-request fetch helpers that resolve to ``(data, error)`` instead of raising.

Every call performs exactly one HTTP request and classifies the outcome:

* transport failure -> ``(None, <httpx.RequestError | OSError>)``, reported to ``warn``
* status outside 2xx -> ``(None, ResponseNotOkError)``
* empty body -> ``("", None)``
* JSON body -> ``(decoded, None)``
* anything else -> ``(text, None)``
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

import httpx
from loguru import logger

from tuplefetch.client import build_async_client, build_client
from tuplefetch.constants import JSON_CONTENT_TYPE, JSON_SUFFIX
from tuplefetch.exceptions import ResponseDecodeError, ResponseNotOkError
from tuplefetch.models.config import Config
from tuplefetch.models.options import RequestOptions
from tuplefetch.result import Err, FetchResult, FetchTuple, Ok

__all__ = [
    "AsyncRequester",
    "Requester",
    "WarnCallback",
    "classify_response",
    "fetch_handler",
    "fetch_handler_sync",
    "fetch_result",
    "fetch_result_sync",
    "log_network_failure",
]

OptionsInput = RequestOptions | Mapping[str, Any] | None
WarnCallback = Callable[[BaseException], object]


class AsyncRequester(Protocol):
    """Anything that can send a request asynchronously, e.g. ``httpx.AsyncClient``."""

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response: ...


class Requester(Protocol):
    """Anything that can send a request, e.g. ``httpx.Client``."""

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response: ...


def log_network_failure(error: BaseException) -> None:
    """Default warning channel: log the caught transport error."""
    logger.warning("Request failed: {error!r}", error=error)


def _coerce_options(options: OptionsInput) -> RequestOptions:
    if options is None:
        return RequestOptions()
    if isinstance(options, RequestOptions):
        return options
    return RequestOptions.model_validate(options)


def _is_json(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == JSON_CONTENT_TYPE or mime.endswith(JSON_SUFFIX)


def classify_response(response: httpx.Response) -> FetchResult:
    """
    Classify a received response into an ``Ok`` payload or an ``Err``.

    The response body must already be read, which is the case for any
    non-streaming ``request()`` call.

    Args:
        response: The response to classify. Must carry its originating request.

    Returns:
        ``Ok`` with ``""``, the text, or the decoded JSON value; ``Err`` with a
        ``ResponseNotOkError`` or ``ResponseDecodeError``.
    """
    request = response.request

    if not response.is_success:
        return Err(
            ResponseNotOkError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                url=str(request.url),
                method=request.method,
            )
        )

    if not response.content:
        return Ok("")

    content_type = response.headers.get("content-type", "")
    if _is_json(content_type):
        try:
            return Ok(response.json())
        except ValueError as e:
            error = ResponseDecodeError(str(request.url), content_type, str(e))
            error.__cause__ = e
            return Err(error)

    return Ok(response.text)


async def fetch_result(
    url: str,
    options: OptionsInput = None,
    *,
    client: AsyncRequester | None = None,
    config: Config | None = None,
    warn: WarnCallback | None = None,
) -> FetchResult:
    """
    Perform one request and return its tagged outcome.

    Args:
        url: Request target. Relative paths need a client with a ``base_url``.
        options: ``RequestOptions`` or a mapping of the same keys. Defaults to GET.
        client: Transport to send the request with. When omitted, a fresh
            ``httpx.AsyncClient`` is built from ``config`` and closed afterwards.
        config: Settings for the default client. Read from the environment when omitted.
        warn: Called once with the error on transport failure.

    Raises:
        pydantic.ValidationError: If ``options`` is malformed. Nothing is sent.
    """
    request_options = _coerce_options(options)
    kwargs = request_options.to_request_kwargs()
    warn = warn or log_network_failure

    logger.debug(f"Sending {request_options.method} {url}")
    try:
        if client is not None:
            response = await client.request(request_options.method, url, **kwargs)
        else:
            async with build_async_client(config or Config()) as own_client:
                response = await own_client.request(request_options.method, url, **kwargs)
    except (httpx.RequestError, OSError) as e:
        warn(e)
        return Err(e)

    result = classify_response(response)
    outcome = type(result).__name__
    logger.debug(f"{request_options.method} {url} -> {response.status_code} ({outcome})")
    return result


async def fetch_handler(
    url: str,
    options: OptionsInput = None,
    *,
    client: AsyncRequester | None = None,
    config: Config | None = None,
    warn: WarnCallback | None = None,
) -> FetchTuple:
    """
    Perform one request and resolve to ``(data, error)``.

    Exactly one side is populated, except for an empty successful body which
    resolves to ``("", None)``. Request-level failures are never raised.

    Example:
        data, error = await fetch_handler("https://api.example.com/users")
        if error:
            ...
    """
    result = await fetch_result(url, options, client=client, config=config, warn=warn)
    return result.as_tuple()


def fetch_result_sync(
    url: str,
    options: OptionsInput = None,
    *,
    client: Requester | None = None,
    config: Config | None = None,
    warn: WarnCallback | None = None,
) -> FetchResult:
    """Blocking counterpart of :func:`fetch_result`."""
    request_options = _coerce_options(options)
    kwargs = request_options.to_request_kwargs()
    warn = warn or log_network_failure

    logger.debug(f"Sending {request_options.method} {url}")
    try:
        if client is not None:
            response = client.request(request_options.method, url, **kwargs)
        else:
            with build_client(config or Config()) as own_client:
                response = own_client.request(request_options.method, url, **kwargs)
    except (httpx.RequestError, OSError) as e:
        warn(e)
        return Err(e)

    result = classify_response(response)
    outcome = type(result).__name__
    logger.debug(f"{request_options.method} {url} -> {response.status_code} ({outcome})")
    return result


def fetch_handler_sync(
    url: str,
    options: OptionsInput = None,
    *,
    client: Requester | None = None,
    config: Config | None = None,
    warn: WarnCallback | None = None,
) -> FetchTuple:
    """Blocking counterpart of :func:`fetch_handler`."""
    return fetch_result_sync(url, options, client=client, config=config, warn=warn).as_tuple()
