import importlib
import pkgutil
from typing import Any, Mapping

from langchain_core.tools import StructuredTool

from colourlovers_tools.tools import definitions
from colourlovers_tools.tools.groups import TOOL_GROUPS
from colourlovers_tools.tools.http_api import ApiResult, aexecute, execute
from colourlovers_tools.tools.tool_models import ToolSpec


class ToolRegistry:
    """Central tool registry that dynamically discovers tools in the 'definitions' package."""

    _cached_tools: dict[str, ToolSpec] | None = None

    @classmethod
    def _discover_tools(cls) -> dict[str, ToolSpec]:
        if cls._cached_tools is not None:
            return cls._cached_tools

        tools: dict[str, ToolSpec] = {}
        # Walk recursively so tools can be organized by domain folders.
        for _, module_name, is_pkg in pkgutil.walk_packages(
            definitions.__path__, prefix="colourlovers_tools.tools.definitions."
        ):
            if is_pkg:
                continue

            module = importlib.import_module(module_name)

            tool_spec = getattr(module, "tool", None)
            if isinstance(tool_spec, ToolSpec):
                if tool_spec.name in tools:
                    raise ValueError(
                        f"Duplicate tool name detected: {tool_spec.name} "
                        f"(module {module_name})"
                    )
                tools[tool_spec.name] = tool_spec

        cls._cached_tools = tools
        return tools

    @classmethod
    def resolve_tool_names(
        cls, tool_names: list[str], group_names: list[str]
    ) -> list[str]:
        merged: list[str] = []
        for group_name in group_names:
            if group_name not in TOOL_GROUPS:
                raise ValueError(f"Unknown tool group: {group_name}")
            merged.extend(TOOL_GROUPS[group_name])
        merged.extend(tool_names)
        # Keep deterministic order while de-duplicating.
        return list(dict.fromkeys(merged))

    @classmethod
    def get_spec(cls, name: str) -> ToolSpec:
        tools_map = cls._discover_tools()
        if name not in tools_map:
            raise ValueError(f"Unknown tool: {name}")
        return tools_map[name]

    @classmethod
    def get_specs(
        cls, tool_names: list[str], group_names: list[str] | None = None
    ) -> list[ToolSpec]:
        resolved = cls.resolve_tool_names(tool_names, group_names or [])
        tools_map = cls._discover_tools()
        missing = [name for name in resolved if name not in tools_map]
        if missing:
            raise ValueError(f"Unknown tool(s): {', '.join(missing)}")
        return [tools_map[name] for name in resolved]

    @classmethod
    def get_tools(
        cls, tool_names: list[str], group_names: list[str] | None = None
    ) -> list[StructuredTool]:
        return [spec.build() for spec in cls.get_specs(tool_names, group_names)]

    @classmethod
    def definitions(cls, group_names: list[str] | None = None) -> list[dict[str, Any]]:
        """Function-calling declarations for a group selection, or every tool."""
        if group_names:
            specs = cls.get_specs([], group_names)
        else:
            specs = list(cls._discover_tools().values())
        return [spec.definition() for spec in specs]

    @classmethod
    def call(cls, name: str, arguments: Mapping[str, Any] | None = None) -> ApiResult:
        return execute(cls.get_spec(name), arguments)

    @classmethod
    async def acall(
        cls, name: str, arguments: Mapping[str, Any] | None = None
    ) -> ApiResult:
        return await aexecute(cls.get_spec(name), arguments)

    @classmethod
    def list_groups(cls) -> dict[str, list[str]]:
        return dict(TOOL_GROUPS)

    @classmethod
    def list_all_tools(cls) -> list[str]:
        return list(cls._discover_tools().keys())
