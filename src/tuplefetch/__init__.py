from .constants import __version__
from .exceptions import ResponseDecodeError, ResponseNotOkError, TupleFetchError
from .handler import (
    classify_response,
    fetch_handler,
    fetch_handler_sync,
    fetch_result,
    fetch_result_sync,
)
from .models import Config, RequestOptions
from .result import Err, FetchResult, FetchTuple, Ok

__all__ = [
    "Config",
    "Err",
    "FetchResult",
    "FetchTuple",
    "Ok",
    "RequestOptions",
    "ResponseDecodeError",
    "ResponseNotOkError",
    "TupleFetchError",
    "__version__",
    "classify_response",
    "fetch_handler",
    "fetch_handler_sync",
    "fetch_result",
    "fetch_result_sync",
]
