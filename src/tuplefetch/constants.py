__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ENV_PREFIX",
    "JSON_CONTENT_TYPE",
    "JSON_SUFFIX",
    "__version__",
]

__version__ = "0.1.0"

ENV_PREFIX = "TUPLEFETCH_"

DEFAULT_TIMEOUT: float = 10.0
DEFAULT_USER_AGENT = f"tuplefetch/{__version__}"

JSON_CONTENT_TYPE = "application/json"
JSON_SUFFIX = "+json"
