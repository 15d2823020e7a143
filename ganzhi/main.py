"""Command-line entry point: print the cycle, look up or combine elements."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence, TypeVar

from pydantic import ValidationError

from ganzhi.combinations import Ganzhi
from ganzhi.config import AppConfig, load_app_config_or_default
from ganzhi.core.enums import TextFormat
from ganzhi.core.errors import GanzhiError
from ganzhi.cycles import Branch, CyclicMember, Stem
from ganzhi.telemetry import configure_logging

_M = TypeVar("_M", bound=CyclicMember)


def _member_parser(cls: type[_M]) -> Callable[[str], _M]:
    """Build an argparse ``type=`` accepting a pinyin name or a one-based index."""

    def parse(text: str) -> _M:
        if text.lstrip("-").isdigit():
            return cls.from_index(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            names = ", ".join(member.format() for member in cls)
            raise argparse.ArgumentTypeError(
                f"unknown {cls.__name__.lower()} {text!r}, expected an index or one of: {names}"
            ) from None

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ganzhi", description="Sexagenary cycle utilities.")
    parser.add_argument("--config", help="YAML config file (default: config/ganzhi.yml if present)")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=[fmt.value for fmt in TextFormat],
        help="G for pinyin, C for Chinese (default: from config)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("table", help="print all 60 elements")

    show = sub.add_parser("show", help="print the element at a one-based index")
    show.add_argument("index", type=int)

    pair = sub.add_parser("pair", help="combine a stem and a branch")
    pair.add_argument("stem", type=_member_parser(Stem))
    pair.add_argument("branch", type=_member_parser(Branch))
    return parser


def render_table(config: AppConfig, fmt: TextFormat) -> list[str]:
    """Return the cycle as lines of ``config.render.columns`` items each."""

    columns = config.render.columns
    items = [item.format(fmt) for item in Ganzhi.cycle()]
    return [
        config.render.separator.join(items[start : start + columns])
        for start in range(0, len(items), columns)
    ]


def _run(args: argparse.Namespace, config: AppConfig, logger: logging.Logger) -> int:
    fmt = TextFormat.parse(args.fmt or config.render.default_format)
    if args.command == "table":
        for line in render_table(config, fmt):
            print(line)
    elif args.command == "show":
        item = Ganzhi.from_index(args.index)
        print(f"{item.index} {item.format(fmt)}")
    elif args.command == "pair":
        item = Ganzhi.from_pair(args.stem, args.branch)
        print(f"{item.index} {item.format(fmt)}")
    logger.debug("Command finished", extra={"command": args.command, "format": fmt.value})
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_app_config_or_default(args.config)
    except (GanzhiError, FileNotFoundError, ValidationError) as exc:
        print(f"ganzhi: {exc}", file=sys.stderr)
        return 2
    logger = configure_logging(
        level=config.telemetry.log_level,
        log_dir=config.telemetry.log_dir,
    )
    try:
        return _run(args, config, logger)
    except GanzhiError as exc:
        logger.warning("Command failed: %s", exc, extra={"command": args.command})
        print(f"ganzhi: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
