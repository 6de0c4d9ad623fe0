from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tuplefetch.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ENV_PREFIX

__all__ = ["Config"]

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    """
    Settings for the default transport, read from ``TUPLEFETCH_*`` variables
    or a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    follow_redirects: bool = True
    verify: bool = Field(default=True, description="Verify TLS certificates")
    user_agent: str = DEFAULT_USER_AGENT
    log_level: LogLevel = "INFO"
