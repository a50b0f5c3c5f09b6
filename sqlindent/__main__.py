from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import DEFAULT_STYLE, FormatOptions, STYLE_NAMES, load_options
from .errors import ConfigError, InputError
from .fmt import format_sql


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sqlindent", description="Deterministic SQL formatter")
    parser.add_argument("--version", action="version", version=f"sqlindent {__version__}")
    parser.add_argument(
        "paths",
        nargs="*",
        help="SQL files or directories to format (default: read stdin)",
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE.value,
        help=f"Layout style: {', '.join(STYLE_NAMES)} (default: {DEFAULT_STYLE.value})",
    )
    casing = parser.add_mutually_exclusive_group()
    casing.add_argument("--uppercase", dest="uppercase", action="store_true", default=None, help="Uppercase keywords")
    casing.add_argument("--lowercase", dest="uppercase", action="store_false", default=None, help="Lowercase keywords")
    parser.add_argument("--check", action="store_true", help="Exit 1 if any input is not already formatted")
    parser.add_argument("--in-place", action="store_true", dest="in_place", help="Rewrite files in place")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _render(formatted: str) -> str:
    return formatted + "\n"


def _collect_paths(raw: list[str]) -> list[Path]:
    paths: list[Path] = []
    for item in raw:
        path = Path(item)
        if path.is_dir():
            paths.extend(sorted(path.rglob("*.sql")))
        else:
            paths.append(path)
    return paths


def _format_stdin(options: FormatOptions, check: bool) -> int:
    text = sys.stdin.read()
    if not text.strip():
        raise InputError("no SQL input provided")
    formatted = _render(format_sql(text, options))
    if check:
        return 0 if formatted == text else 1
    sys.stdout.write(formatted)
    return 0


def _format_paths(args: argparse.Namespace, options: FormatOptions) -> int:
    has_dir = any(Path(item).is_dir() for item in args.paths)
    paths = _collect_paths(args.paths)
    if not paths:
        print("ok: no .sql files found")
        return 0
    if (has_dir or len(paths) > 1) and not (args.check or args.in_place):
        print("failed: formatting several files requires --check or --in-place", file=sys.stderr)
        return 1

    any_changed = False
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise InputError(exc.strerror or str(exc), path=str(path)) from exc
        if not text.strip():
            if args.check or args.in_place:
                continue
            raise InputError("no SQL input provided", path=str(path))
        formatted = _render(format_sql(text, options))

        if args.check:
            if formatted != text:
                print(f"needs format: {path}")
                any_changed = True
            continue

        if args.in_place:
            if formatted != text:
                tmp_path = path.with_suffix(path.suffix + ".tmp")
                tmp_path.write_text(formatted, encoding="utf-8")
                tmp_path.replace(path)
                print(f"ok: wrote {path}")
            continue

        sys.stdout.write(formatted)

    if args.check:
        return 1 if any_changed else 0
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.check and args.in_place:
        print("failed: --check and --in-place are mutually exclusive", file=sys.stderr)
        return 1

    try:
        options = load_options(args.style, args.uppercase)
    except ConfigError as exc:
        print(f"failed: {exc}", file=sys.stderr)
        return 2

    use_stdin = not args.paths or args.paths == ["-"]
    if use_stdin and args.in_place:
        print("failed: --in-place needs file arguments", file=sys.stderr)
        return 1

    try:
        if use_stdin:
            return _format_stdin(options, args.check)
        return _format_paths(args, options)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
