from __future__ import annotations

import argparse
import asyncio
import json

from colourlovers_tools.config.settings import get_settings
from colourlovers_tools.observability.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call COLOURlovers API tools")
    parser.add_argument("tool", nargs="?", help="Name of the tool to call")
    parser.add_argument(
        "--args",
        default="{}",
        help="JSON object with the tool arguments, e.g. '{\"hex\": \"5a5b9f\"}'",
    )
    parser.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="Run the call through the async executor",
    )
    parser.add_argument("--list-tools", action="store_true", help="List available tools")
    parser.add_argument(
        "--list-tool-groups", action="store_true", help="List available tool groups"
    )
    parser.add_argument(
        "--show-schema",
        metavar="NAME",
        help="Print the function-calling declaration of a tool",
    )
    parser.add_argument("--server", action="store_true", help="Start the API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument(
        "--port", type=int, default=8000, help="Port to run the server on"
    )
    parser.add_argument("--reload", action="store_true", help="Enable hot reloading")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.server:
        import uvicorn

        print(
            f"Starting server on {args.host}:{args.port} (reload={'on' if args.reload else 'off'})"
        )
        if args.reload:
            # When reloading, pass the import string instead of the app object
            uvicorn.run(
                "colourlovers_tools.api:app", host=args.host, port=args.port, reload=True
            )
        else:
            from colourlovers_tools.api import app

            uvicorn.run(app, host=args.host, port=args.port)
        return

    from colourlovers_tools.tools.registry import ToolRegistry

    if args.list_tools:
        for name in ToolRegistry.list_all_tools():
            spec = ToolRegistry.get_spec(name)
            print(f"- {name}: {spec.description}")
            if spec.intent:
                print(f"    intent: {spec.intent}")
            if spec.schema_notes:
                print(f"    notes:  {spec.schema_notes}")
        return

    if args.list_tool_groups:
        for group_name, tools in ToolRegistry.list_groups().items():
            print(f"- {group_name}: {', '.join(tools)}")
        return

    if args.show_schema:
        try:
            spec = ToolRegistry.get_spec(args.show_schema)
        except ValueError as exc:
            parser.error(str(exc))
        print(json.dumps(spec.definition(), indent=2))
        return

    if not args.tool:
        parser.error("Provide a tool name or use --list-tools / --list-tool-groups")

    try:
        arguments = json.loads(args.args)
    except json.JSONDecodeError as exc:
        parser.error(f"--args is not valid JSON: {exc}")
    if not isinstance(arguments, dict):
        parser.error("--args must be a JSON object")

    try:
        if args.use_async:
            result = asyncio.run(ToolRegistry.acall(args.tool, arguments))
        else:
            result = ToolRegistry.call(args.tool, arguments)
    except ValueError as exc:
        parser.error(str(exc))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
