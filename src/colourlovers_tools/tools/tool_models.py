from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Any, Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel


@dataclass(frozen=True)
class EndpointConfig:
    """One upstream resource and the pydantic model describing its parameters.

    Attributes:
        path: Resource path relative to the API base URL. ``{name}`` placeholders
            mark fields of ``args_schema`` that are sent as path segments.
        args_schema: Input model. Field order is the query string order.
        method: Always GET for this API.
    """

    path: str
    args_schema: type[BaseModel]
    method: Literal["GET"] = "GET"

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            field_name
            for _, field_name, _, _ in Formatter().parse(self.path)
            if field_name
        )


@dataclass(frozen=True)
class ToolSpec:
    """Static definition of an API tool.

    Attributes:
        name: The unique identifier for the tool.
        description: Description shown to the invoking model.
        endpoint: Upstream resource the tool calls.
        action: Phrase completing "An error occurred while ..." in failures.
        intent: Formal semantic purpose of the tool for developer clarity.
        schema_notes: Expected input/output patterns and semantic constraints.
    """

    name: str
    description: str
    endpoint: EndpointConfig
    action: str
    intent: str = ""
    schema_notes: str = ""

    def build(self) -> StructuredTool:
        from colourlovers_tools.tools.http_api import build_api_tool

        return build_api_tool(self)

    def definition(self) -> dict[str, Any]:
        """Function-calling declaration: name, description and JSON-Schema parameters."""
        from langchain_core.utils.function_calling import convert_to_openai_tool

        return convert_to_openai_tool(self.build())
