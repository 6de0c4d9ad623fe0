__all__ = ["ResponseDecodeError", "ResponseNotOkError", "TupleFetchError"]


class TupleFetchError(Exception):
    """Base exception for all tuplefetch errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResponseNotOkError(TupleFetchError):
    """Returned in place of a payload when the response status is outside 2xx."""

    def __init__(self, status_code: int, reason: str, url: str, method: str = "GET") -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.method = method
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"Response not ok: {status} ({method} {url})")


class ResponseDecodeError(TupleFetchError):
    """The response declared a JSON body that could not be decoded."""

    def __init__(self, url: str, content_type: str, detail: str = "") -> None:
        self.url = url
        self.content_type = content_type
        message = f"Failed to decode {content_type} body from {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
