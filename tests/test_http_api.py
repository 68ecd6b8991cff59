from __future__ import annotations

import logging

import httpx
import pytest
import respx
from httpx import Response

from colourlovers_tools.config.settings import get_settings
from colourlovers_tools.tools.definitions.colourlovers import color, palette, palettes
from colourlovers_tools.tools.errors import ArgumentError
from colourlovers_tools.tools.http_api import (
    aexecute,
    build_api_tool,
    build_request_url,
    execute,
    parse_arguments,
)

from .conftest import BASE_URL, HOST


def _url(spec, arguments) -> str:
    params = parse_arguments(spec.endpoint, arguments)
    return str(build_request_url(BASE_URL, spec.endpoint, params))


def test_color_url_applies_declared_defaults():
    assert _url(color.tool, {"hex": "5a5b9f"}) == (
        "http://www.colourlovers.com/api/color/5a5b9f?comments=1&format=json"
    )


def test_color_url_strips_leading_hash_and_encodes_false():
    assert _url(color.tool, {"hex": "#5a5b9f", "comments": False}) == (
        "http://www.colourlovers.com/api/color/5a5b9f?comments=0&format=json"
    )


def test_palettes_url_omits_unset_optionals():
    assert _url(palettes.tool, {"lover": "testuser", "numResults": 5}) == (
        "http://www.colourlovers.com/api/palettes?lover=testuser&format=json&numResults=5"
    )


def test_query_values_are_percent_encoded():
    url = httpx.URL(
        _url(palettes.tool, {"lover": "testuser", "hex": "#aabbcc", "keywords": "ocean blue"})
    )

    assert "%23aabbcc" in str(url)
    assert " " not in str(url)
    assert url.params["hex"] == "#aabbcc"
    assert url.params["keywords"] == "ocean blue"


def test_base_url_without_trailing_slash_keeps_api_prefix():
    params = parse_arguments(palette.tool.endpoint, {"paletteId": 92095})
    url = build_request_url("http://mirror.test/api", palette.tool.endpoint, params)

    assert str(url) == "http://mirror.test/api/palette/92095?format=json"


def test_parse_arguments_reports_missing_required_field():
    with pytest.raises(ArgumentError, match="paletteId"):
        parse_arguments(palette.tool.endpoint, {})


def test_parse_arguments_rejects_unknown_field():
    with pytest.raises(ArgumentError, match="colour"):
        parse_arguments(color.tool.endpoint, {"hex": "5a5b9f", "colour": "blue"})


@respx.mock
def test_execute_returns_body_verbatim():
    body = {"hex": "5a5b9f", "title": "Example"}
    route = respx.get(host=HOST, path="/api/color/5a5b9f").mock(
        return_value=Response(200, json=body)
    )

    result = execute(color.tool, {"hex": "5a5b9f"})

    assert result == body
    assert str(route.calls.last.request.url) == (
        "http://www.colourlovers.com/api/color/5a5b9f?comments=1&format=json"
    )


@respx.mock
def test_execute_passes_list_bodies_through():
    body = [{"id": 1, "title": "One"}, {"id": 2, "title": "Two"}]
    respx.get(host=HOST, path="/api/palettes").mock(return_value=Response(200, json=body))

    assert execute(palettes.tool, {"lover": "testuser"}) == body


@respx.mock
def test_execute_wraps_http_error_with_decoded_detail():
    respx.get(host=HOST, path="/api/palette/1").mock(
        return_value=Response(404, json={"message": "not found"})
    )

    result = execute(palette.tool, {"paletteId": 1})

    assert set(result) == {"error"}
    assert result["error"].startswith("An error occurred while retrieving the palette:")
    assert "HTTP 404" in result["error"]
    assert "not found" in result["error"]


@respx.mock
def test_execute_wraps_http_error_with_text_detail():
    respx.get(host=HOST, path="/api/palette/1").mock(
        return_value=Response(503, text="Service Unavailable")
    )

    result = execute(palette.tool, {"paletteId": 1})

    assert "HTTP 503: Service Unavailable" in result["error"]


@respx.mock
def test_execute_wraps_transport_failure():
    respx.get(host=HOST, path="/api/color/5a5b9f").mock(
        side_effect=httpx.ConnectError("Connection refused")
    )

    result = execute(color.tool, {"hex": "5a5b9f"})

    assert set(result) == {"error"}
    assert "Connection refused" in result["error"]


@respx.mock
def test_execute_wraps_non_json_body():
    respx.get(host=HOST, path="/api/color/5a5b9f").mock(
        return_value=Response(
            200, text="<colors><color/></colors>", headers={"Content-Type": "text/xml"}
        )
    )

    result = execute(color.tool, {"hex": "5a5b9f", "format": "xml"})

    assert "not valid JSON" in result["error"]
    assert "text/xml" in result["error"]


@respx.mock(assert_all_called=False)
def test_execute_rejects_invalid_arguments_without_request():
    route = respx.get(host=HOST, path__startswith="/api/palette/").mock(
        return_value=Response(200, json={})
    )

    result = execute(palette.tool, {})

    assert "paletteId" in result["error"]
    assert not route.called


@respx.mock
def test_execute_logs_failures(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.WARNING, logger="colourlovers_tools")
    respx.get(host=HOST, path="/api/palette/1").mock(return_value=Response(500, json={}))

    execute(palette.tool, {"paletteId": 1})

    assert any("get_palette failed" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
@respx.mock
async def test_aexecute_returns_body_verbatim():
    body = [{"id": 92095, "title": "Giant Goldfish"}]
    route = respx.get(host=HOST, path="/api/palette/92095").mock(
        return_value=Response(200, json=body)
    )

    result = await aexecute(palette.tool, {"paletteId": 92095})

    assert result == body
    assert route.calls.last.request.url.params["format"] == "json"


@pytest.mark.asyncio
@respx.mock
async def test_aexecute_wraps_transport_failure():
    respx.get(host=HOST, path="/api/palettes").mock(
        side_effect=httpx.ConnectError("Connection refused")
    )

    result = await aexecute(palettes.tool, {"lover": "testuser"})

    assert "Connection refused" in result["error"]


@respx.mock
def test_structured_tool_invoke_uses_configured_base_url():
    route = respx.get(host="mirror.test", path="/api/color/5a5b9f").mock(
        return_value=Response(200, json={"hex": "5a5b9f"})
    )
    tool = build_api_tool(color.tool, base_url="http://mirror.test/api/")

    assert tool.invoke({"hex": "5a5b9f"}) == {"hex": "5a5b9f"}
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_structured_tool_ainvoke_uses_coroutine():
    respx.get(host=HOST, path="/api/palettes").mock(
        return_value=Response(200, json=[{"id": 7}])
    )
    tool = palettes.tool.build()

    assert await tool.ainvoke({"lover": "testuser"}) == [{"id": 7}]


def test_structured_tool_reports_validation_error_as_envelope():
    tool = palette.tool.build()

    output = tool.invoke({})

    assert output == {
        "error": "An error occurred while retrieving the palette: paletteId: Field required"
    }


@pytest.mark.parametrize("value", ["#", "", "  ", "5a5b9", "5a5b9fx", "zzzzzz", "ab/cdef"])
@respx.mock(assert_all_called=False)
def test_color_rejects_malformed_hex_without_request(value):
    route = respx.get(host=HOST, path__startswith="/api/color").mock(
        return_value=Response(200, json=[])
    )

    result = execute(color.tool, {"hex": value})

    assert set(result) == {"error"}
    assert "hex" in result["error"]
    assert not route.called


def test_execute_reports_bad_settings_as_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DEFAULT_API_TIMEOUT_SECONDS", "abc")
    get_settings.cache_clear()

    result = execute(palette.tool, {"paletteId": 1})

    assert set(result) == {"error"}
    assert "Settings" in result["error"]


@pytest.mark.asyncio
async def test_aexecute_reports_bad_settings_as_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DEFAULT_API_TIMEOUT_SECONDS", "abc")
    get_settings.cache_clear()

    result = await aexecute(palette.tool, {"paletteId": 1})

    assert set(result) == {"error"}
