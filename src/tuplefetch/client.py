import httpx

from tuplefetch.models.config import Config

__all__ = ["build_async_client", "build_client"]


def _client_options(config: Config) -> dict:
    return {
        "timeout": httpx.Timeout(config.timeout),
        "follow_redirects": config.follow_redirects,
        "verify": config.verify,
        "headers": {"User-Agent": config.user_agent},
    }


def build_async_client(config: Config) -> httpx.AsyncClient:
    """
    Build the default asynchronous transport for a single call.

    Args:
        config: Settings providing timeout, redirect and TLS behaviour.
    """
    return httpx.AsyncClient(**_client_options(config))


def build_client(config: Config) -> httpx.Client:
    """Build the default synchronous transport for a single call."""
    return httpx.Client(**_client_options(config))
