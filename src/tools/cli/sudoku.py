"""Command line front end: solve, check and report."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from contracts.errors import GridError, PayloadError
from ports import grid_port
from ports.text_format import parse_grid, render, to_line
from settings import RuntimeSettings, build_env, resolve_settings
from tools.reports import solve_report

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _cli_env(args: argparse.Namespace) -> Dict[str, str]:
    env: Dict[str, str] = {}
    if args.events is not None:
        env["CLI_SUDOKU_EVENTS_ENABLED"] = "1" if args.events else "0"
    if args.events_dir:
        env["CLI_SUDOKU_EVENTS_DIR"] = args.events_dir
    if args.log_level:
        env["CLI_SUDOKU_LOG_LEVEL"] = args.log_level
    if getattr(args, "empty_char", None):
        env["CLI_SUDOKU_EMPTY_CHAR"] = args.empty_char
    if getattr(args, "style", None):
        env["CLI_SUDOKU_STYLE"] = args.style
    return env


def _read_source(args: argparse.Namespace) -> str:
    if args.grid is not None:
        return args.grid
    try:
        if args.file and args.file != "-":
            return Path(args.file).read_text(encoding="utf-8")
        return sys.stdin.read()
    except UnicodeDecodeError as exc:
        raise PayloadError("input is not valid UTF-8") from exc


def _read_payload(args: argparse.Namespace) -> Dict[str, Any]:
    text = _read_source(args)
    if text.lstrip().startswith("{"):
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PayloadError(f"invalid JSON: {exc.msg}") from exc
    return {"fields": parse_grid(text)}


def _format_grid(fields: List[int], settings: RuntimeSettings) -> str:
    if settings.style == "line":
        return to_line(fields)
    return render(fields, empty_char=settings.empty_char)


def cmd_solve(args: argparse.Namespace, env: Dict[str, str]) -> int:
    settings = resolve_settings(env)
    result = grid_port.port_solve(_read_payload(args), env=env)
    if args.json:
        print(json.dumps(result, indent=2, sort_keys=True))
    else:
        print(_format_grid(result["fields"], settings))
        if not result["solved"]:
            print("no solution", file=sys.stderr)
    return EXIT_OK if result["solved"] else EXIT_FAILED


def cmd_check(args: argparse.Namespace, env: Dict[str, str]) -> int:
    report = grid_port.port_check(_read_payload(args))
    if args.json:
        print(json.dumps(report, indent=2, sort_keys=True))
    else:
        print("valid" if report["valid"] else "invalid")
        for issue in report["issues"]:
            print(f"{issue['severity']:5} {issue['code']:18} {issue['path']:14} {issue['msg']}")
    return EXIT_OK if report["valid"] else EXIT_FAILED


def cmd_report(args: argparse.Namespace, env: Dict[str, str]) -> int:
    base_dir = Path(args.path) if args.path else resolve_settings(env).events_dir
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = solve_report.aggregate(files)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return EXIT_OK


def _add_grid_input(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File holding the grid as text or a JSON payload ('-' or omitted reads stdin)",
    )
    parser.add_argument("--grid", default=None, help="Grid given inline, e.g. an 81-char line")
    parser.add_argument("--json", action="store_true", help="Print the result payload as JSON")


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--events",
        dest="events",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Record solve events to the JSONL log",
    )
    common.add_argument("--events-dir", default=None, help="Directory for solve event logs")
    common.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")

    parser = argparse.ArgumentParser(description="Sudoku grid checker and backtracking solver")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", parents=[common], help="Solve a grid")
    _add_grid_input(solve)
    solve.add_argument("--empty-char", default=None, help="Character shown for empty cells")
    solve.add_argument("--style", choices=("boxed", "line"), default=None)
    solve.set_defaults(func=cmd_solve)

    check = sub.add_parser("check", parents=[common], help="Report row/column/box conflicts")
    _add_grid_input(check)
    check.set_defaults(func=cmd_check)

    report = sub.add_parser("report", parents=[common], help="Aggregate solve event logs")
    report.add_argument("path", nargs="?", default=None, help="Directory containing JSONL logs")
    report.set_defaults(func=cmd_report)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    env = build_env(_cli_env(args))
    logging.basicConfig(
        level=resolve_settings(env).log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args, env)
    except (GridError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
