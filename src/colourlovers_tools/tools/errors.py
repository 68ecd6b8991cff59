"""Failures raised inside the GET executor before they are folded into an ApiError."""

from __future__ import annotations

import json
from typing import Any


class ApiToolError(Exception):
    """Base class for every failure of a single API tool call."""


class ArgumentError(ApiToolError):
    """Caller arguments did not match the tool's input model."""


class UpstreamHttpError(ApiToolError):
    def __init__(self, status_code: int, detail: Any) -> None:
        self.status_code = status_code
        self.detail = detail
        rendered = detail if isinstance(detail, str) else json.dumps(detail)
        super().__init__(f"HTTP {status_code}: {rendered}")


class TransportError(ApiToolError):
    """The request never produced a response (connect, read or timeout failure)."""


class DecodeError(ApiToolError):
    """A response body could not be decoded as JSON."""
