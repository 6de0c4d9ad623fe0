import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = ["RequestOptions"]

# RFC 9110 token characters
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Z]+$")

QueryValue = str | int | float | bool


class RequestOptions(BaseModel):
    """Request configuration forwarded to the transport for a single call."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    method: str = "GET"
    headers: dict[str, str] | None = None
    body: str | bytes | None = None
    # "json" shadows BaseModel.json, hence the alias
    json_body: Any = Field(default=None, alias="json")
    params: dict[str, QueryValue] | None = None
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("method")
    @classmethod
    def normalize_method(cls, value: str) -> str:
        method = value.strip().upper()
        if not _METHOD_RE.match(method):
            raise ValueError(f"Invalid HTTP method: {value!r}")
        return method

    @model_validator(mode="after")
    def check_single_payload(self) -> "RequestOptions":
        if self.body is not None and "json_body" in self.model_fields_set:
            raise ValueError("Options 'body' and 'json' are mutually exclusive.")
        return self

    def to_request_kwargs(self) -> dict[str, Any]:
        """Translate the options that were set into ``httpx`` keyword arguments."""
        kwargs: dict[str, Any] = {}
        if self.headers is not None:
            kwargs["headers"] = self.headers
        if self.body is not None:
            kwargs["content"] = self.body
        if "json_body" in self.model_fields_set:
            kwargs["json"] = self.json_body
        if self.params is not None:
            kwargs["params"] = self.params
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs
