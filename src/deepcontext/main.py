"""Command-line entry point: deepcontext <path> [depth] [--debug] [--json]."""

import argparse
import asyncio
import json
import logging
import sys

from .analysis import analyze_imports
from .config import get_config
from .models.analysis_models import AnalysisResult

logger = logging.getLogger(__name__)

USAGE = "Usage: deepcontext <path> [depth] [--debug] [--json]"
EXAMPLE = "Example: deepcontext admin-wrapper.tsx 2"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepcontext",
        description="Trace local imports of a JavaScript/TypeScript file or directory.",
        usage=USAGE.removeprefix("Usage: "),
    )
    parser.add_argument("path", nargs="?", help="File or directory to analyze")
    parser.add_argument("depth", nargs="?", default=None, help="Import hops to follow (default: 0)")
    parser.add_argument("--debug", action="store_true", help="Trace every resolution decision")
    parser.add_argument("--json", action="store_true", help="Print the content and imports maps as JSON")
    return parser


def parse_depth(depth_arg: str | None, default: int) -> int | None:
    """Parse a non-negative depth, or None when invalid."""
    if depth_arg is None:
        return default
    try:
        depth = int(depth_arg, 10)
    except ValueError:
        return None
    return depth if depth >= 0 else None


def format_result(result: AnalysisResult, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(result.to_dict(), indent=2)
    sections = []
    for file_path, content in result.content.items():
        sections.append(f"\n------- {file_path} -------\n{content}")
    return "\n".join(sections)


def setup_logging(level: str, debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    debug = args.debug or config.debug_mode

    if not args.path:
        print("Please provide a path to analyze", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        return 1

    depth = parse_depth(args.depth, config.default_depth)
    if depth is None:
        print("Depth must be a non-negative number", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    setup_logging(config.log_level, debug)

    try:
        result = asyncio.run(
            analyze_imports(
                args.path,
                depth,
                debug,
                config_file_name=config.config_file_name,
                max_alias_rewrites=config.max_alias_rewrites,
            )
        )
    except OSError as e:
        logger.debug("Analysis of %s failed", args.path, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_result(result, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
