from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ValidationError

from colourlovers_tools.config.settings import get_settings
from colourlovers_tools.tools.errors import (
    ApiToolError,
    ArgumentError,
    DecodeError,
    TransportError,
    UpstreamHttpError,
)
from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec

LOGGER = logging.getLogger(__name__)

# Decoded JSON body on success, {"error": "..."} on failure.
ApiResult = Any


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems)


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def parse_arguments(
    endpoint: EndpointConfig, arguments: Mapping[str, Any] | None
) -> BaseModel:
    try:
        return endpoint.args_schema.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        raise ArgumentError(_describe_validation_error(exc)) from exc


def build_request_url(
    base_url: str, endpoint: EndpointConfig, params: BaseModel
) -> httpx.URL:
    """Resolve path placeholders and append the query string.

    Fields left at ``None`` are omitted; fields with a declared default are
    always sent.
    """
    values = params.model_dump(exclude_none=True)
    segments = {
        name: quote(_encode(values.pop(name)), safe="")
        for name in endpoint.path_params
    }
    url = httpx.URL(base_url.rstrip("/") + "/").join(endpoint.path.format(**segments))
    query = {name: _encode(value) for name, value in values.items()}
    return url.copy_merge_params(query) if query else url


def _decode(response: httpx.Response) -> Any:
    if response.is_success:
        try:
            return response.json()
        except ValueError as exc:
            content_type = response.headers.get("content-type", "unknown")
            raise DecodeError(
                f"response body is not valid JSON (content-type: {content_type}): {exc}"
            ) from exc

    try:
        detail: Any = response.json()
    except ValueError:
        detail = response.text or response.reason_phrase
    raise UpstreamHttpError(response.status_code, detail)


def _failure(spec: ToolSpec, exc: Exception) -> dict[str, str]:
    message = str(exc) if isinstance(exc, ApiToolError) else f"{type(exc).__name__}: {exc}"
    LOGGER.warning("%s failed: %s", spec.name, message)
    return {"error": f"An error occurred while {spec.action}: {message}"}


def _resolve(base_url: str | None, timeout_seconds: float | None) -> tuple[str, float]:
    settings = get_settings()
    return (
        base_url or settings.colourlovers_api_base_url,
        settings.default_api_timeout_seconds
        if timeout_seconds is None
        else timeout_seconds,
    )


def execute(
    spec: ToolSpec,
    arguments: Mapping[str, Any] | None,
    *,
    base_url: str | None = None,
    timeout_seconds: float | None = None,
) -> ApiResult:
    """Run one GET for ``spec``. Never raises; failures come back as ``{"error": ...}``."""
    try:
        base_url, timeout_seconds = _resolve(base_url, timeout_seconds)
        params = parse_arguments(spec.endpoint, arguments)
        url = build_request_url(base_url, spec.endpoint, params)
        LOGGER.debug("%s GET %s", spec.name, url)
        with httpx.Client(timeout=timeout_seconds) as client:
            try:
                response = client.request(spec.endpoint.method, url)
            except httpx.RequestError as exc:
                raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        return _decode(response)
    except Exception as exc:  # noqa: BLE001
        return _failure(spec, exc)


async def aexecute(
    spec: ToolSpec,
    arguments: Mapping[str, Any] | None,
    *,
    base_url: str | None = None,
    timeout_seconds: float | None = None,
) -> ApiResult:
    try:
        base_url, timeout_seconds = _resolve(base_url, timeout_seconds)
        params = parse_arguments(spec.endpoint, arguments)
        url = build_request_url(base_url, spec.endpoint, params)
        LOGGER.debug("%s GET %s", spec.name, url)
        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            try:
                response = await client.request(spec.endpoint.method, url)
            except httpx.RequestError as exc:
                raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        return _decode(response)
    except Exception as exc:  # noqa: BLE001
        return _failure(spec, exc)


def build_api_tool(
    spec: ToolSpec,
    base_url: str | None = None,
    timeout_seconds: float | None = None,
) -> StructuredTool:
    """Create a standardized GET tool wrapper for a COLOURlovers endpoint."""
    base_url, timeout_seconds = _resolve(base_url, timeout_seconds)

    def _run(**kwargs: Any) -> ApiResult:
        return execute(spec, kwargs, base_url=base_url, timeout_seconds=timeout_seconds)

    async def _arun(**kwargs: Any) -> ApiResult:
        return await aexecute(
            spec, kwargs, base_url=base_url, timeout_seconds=timeout_seconds
        )

    def _on_validation_error(exc: ValidationError) -> dict[str, str]:
        # LangChain validates before _run is reached; keep the same envelope.
        return _failure(spec, ArgumentError(_describe_validation_error(exc)))

    return StructuredTool.from_function(
        name=spec.name,
        description=spec.description,
        func=_run,
        coroutine=_arun,
        args_schema=spec.endpoint.args_schema,
        handle_validation_error=_on_validation_error,
    )
