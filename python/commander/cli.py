"""commander CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .commands import build_registry
from .context import ConsoleContext
from .converter import ParameterConverter
from .executor import CommandExecutor
from .output import ResultPrinter
from .repl import ConsoleREPL

LOG = logging.getLogger("commander.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Commander text console")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("COMMANDER_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        help="Execute a command non-interactively (repeatable; quote the command string)",
    )
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".commander-history",
        help="Path to command history file",
    )
    parser.add_argument("--history-limit", type=int, default=50, help="Number of history entries to keep")
    parser.add_argument("--scene", help="JSON file with the scene objects commands can target")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed arguments instead of substituting zero values",
    )
    return parser


def build_executor(ctx: ConsoleContext) -> CommandExecutor:
    """Wire a registry, converter and target resolver around *ctx*."""
    registry = build_registry(ctx)
    return CommandExecutor(
        registry,
        object_space=ctx.objects,
        converter=ParameterConverter(strict=ctx.strict),
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = ConsoleContext(
        json_output=args.json,
        strict=args.strict,
        history_path=args.history,
        history_limit=args.history_limit,
    )
    try:
        ctx.load_scene(args.scene)
    except (OSError, ValueError, KeyError) as exc:
        print(f"error: cannot load scene {args.scene}: {exc}", file=sys.stderr)
        return 2
    executor = build_executor(ctx)
    if args.command:
        return _run_commands(ctx, executor, args.command)
    repl = ConsoleREPL(ctx, executor)
    try:
        return repl.run()
    except KeyboardInterrupt:
        print()
        return 0


def _run_commands(ctx: ConsoleContext, executor: CommandExecutor, lines: List[str]) -> int:
    executor.add_observer(ResultPrinter(ctx))
    for line in lines:
        result = executor.execute(line)
        if not result.ok:
            return 1
        if ctx.quit_requested:
            break
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
