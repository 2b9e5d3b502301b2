"""Command line front-end for the Sudoku solver."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, List

import project_config
from contracts import validator
from contracts.errors import MalformedGridError, ValidationIssue
from solver import codec, log
from solver.solver_port import solve_puzzle
from tools.reports import solve_report

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_MALFORMED = 2


def _configure_events(log_dir: str | None) -> None:
    if log_dir:
        log.configure(log_dir)
        return
    if project_config.resolve("events.enabled", False):
        log.configure(
            project_config.resolve("events.dir", "logs/solver"),
            max_bytes=int(project_config.get_section("events.max_bytes", 0)) or None,
        )


def _output_mode(args: argparse.Namespace) -> str:
    return args.output or str(project_config.resolve("cli.output", "json"))


def _read_puzzle(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.puzzle:
        return args.puzzle
    raise SystemExit("either PUZZLE or --file is required")


def _print_result(result: dict, mode: str) -> None:
    if mode == "text":
        if result["conflict"]:
            print(f"Invalid puzzle: {result['conflict']}")
        elif not result["solved"]:
            print("No solution found for this puzzle.")
        else:
            print(codec.format_grid(codec.from_string(result["grid"])))
        return
    print(json.dumps(result, indent=2, sort_keys=True))


def cmd_solve(args: argparse.Namespace) -> int:
    _configure_events(args.log_dir)
    try:
        puzzle = codec.from_string(_read_puzzle(args))
    except MalformedGridError as exc:
        print(str(exc))
        return EXIT_MALFORMED
    result = solve_puzzle(puzzle)
    _print_result(result, _output_mode(args))
    if args.pdf:
        from tools import printer

        solution = codec.from_string(result["grid"]) if result["solved"] else None
        printer.export_pdf(puzzle, solution, args.pdf)
    return EXIT_OK if result["solved"] else EXIT_FAILED


def _print_report(ok: bool, errors: Iterable[ValidationIssue]) -> None:
    payload = {"ok": ok, "errors": [issue.to_dict() for issue in errors]}
    print(json.dumps(payload, indent=2, sort_keys=True))


def cmd_check(args: argparse.Namespace) -> int:
    try:
        grid = codec.from_string(_read_puzzle(args))
    except MalformedGridError as exc:
        _print_report(False, exc.report.errors)
        return EXIT_MALFORMED
    report = validator.validate({"grid": codec.to_string(grid)})
    _print_report(report.ok, report.errors)
    if report.ok:
        return EXIT_OK
    if any(not issue.code.startswith("invariant.grid.duplicate") for issue in report.errors):
        return EXIT_MALFORMED
    return EXIT_FAILED


def _iter_puzzles(path: Path) -> Iterable[str]:
    for line in path.read_text().splitlines():
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        yield value


def cmd_batch(args: argparse.Namespace) -> int:
    _configure_events(args.log_dir)
    summaries: List[dict] = []
    exit_code = EXIT_OK
    for number, puzzle in enumerate(_iter_puzzles(Path(args.file)), start=1):
        puzzle_id = f"{Path(args.file).name}:{number}"
        try:
            result = solve_puzzle(puzzle, puzzle_id=puzzle_id)
        except MalformedGridError as exc:
            summaries.append({"id": puzzle_id, "error": str(exc)})
            exit_code = EXIT_MALFORMED
            continue
        if not result["solved"] and exit_code == EXIT_OK:
            exit_code = EXIT_FAILED
        summaries.append(result)
    print(json.dumps(summaries, indent=2, sort_keys=True))
    return exit_code


def cmd_report_events(args: argparse.Namespace) -> int:
    base_dir = Path(args.path)
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = solve_report.aggregate(files)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles by backtracking")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve a single puzzle")
    solve.add_argument("puzzle", nargs="?", help="81 characters, 0 or . for empty cells")
    solve.add_argument("--file", default=None, help="Read the puzzle from a file")
    solve.add_argument("--output", choices=("json", "text"), default=None)
    solve.add_argument("--log-dir", default=None, help="Append solve events under this directory")
    solve.add_argument("--pdf", default=None, help="Also render puzzle and solution to this PDF")
    solve.set_defaults(func=cmd_solve)

    check = sub.add_parser("check", help="Validate a puzzle without solving it")
    check.add_argument("puzzle", nargs="?")
    check.add_argument("--file", default=None)
    check.set_defaults(func=cmd_check)

    batch = sub.add_parser("batch", help="Solve every puzzle listed in a file, one per line")
    batch.add_argument("file")
    batch.add_argument("--log-dir", default=None)
    batch.set_defaults(func=cmd_batch)

    report = sub.add_parser("report-events", help="Aggregate solve event logs")
    report.add_argument("path", help="Directory containing JSONL logs")
    report.set_defaults(func=cmd_report_events)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
