from .config import Config
from .options import RequestOptions

__all__ = ["Config", "RequestOptions"]
