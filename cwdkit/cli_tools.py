import argparse
import json
import logging
import sys
from typing import Any

from cwdkit.config.settings import settings
from cwdkit.container import container
from cwdkit.exceptions import DirectoryError, ToolArgumentError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cwdkit-tools",
        description=(
            "Invoke one working-directory tool and print its result as JSON."
        ),
    )
    parser.add_argument(
        "tool",
        nargs="?",
        help="Tool name, e.g. os.chdir, os.cd, os.curdir",
    )
    parser.add_argument("--path", default=None, help="Directory argument")
    parser.add_argument(
        "--list", action="store_true", help="List available tools and exit"
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (JSON) with colors",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log tool activity to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    handler = container.get_tools_handler()

    if args.list:
        _emit(handler.available_tools(), args.pretty)
        return 0
    if not args.tool:
        parser.print_usage(sys.stderr)
        print("cwdkit-tools: error: a tool name is required", file=sys.stderr)
        return 2

    arguments: dict[str, Any] = {}
    if args.path is not None:
        arguments["path"] = args.path

    try:
        result = handler.dispatch(args.tool, arguments)
    except (ToolArgumentError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except DirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit({"name": args.tool, "arguments": arguments, "result": result}, args.pretty)
    # os.chdir reports failure as false, os.cd as null
    return 1 if result is False or result is None else 0


def _emit(data: Any, pretty: bool) -> None:
    if pretty:
        from rich.console import Console

        Console().print_json(data=data)
    else:
        print(json.dumps(data, ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
