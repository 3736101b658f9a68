"""
talord/cli.py

Command-line interface for the Danish numeral namer.

Typical usage:

    talord name 42 -3.5 1_000_001
    talord repl
    talord serve --port 8000

Commands:

- `name`  prints the name of each VALUE on its own line.
- `repl`  prompts for one number per line until end of input.
- `serve` runs the HTTP API with uvicorn.

Names go to stdout; invalid-input messages of `name` and log events go to
stderr.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from talord.core.domain.exceptions import InvalidNumberError, NumberOutOfRangeError
from talord.core.use_cases.name_number import NameNumber
from talord.shared.config import settings
from talord.shared.logging_setup import init_logging

PROMPT = "Get the Danish compound numeral name of number:"
INVALID_INPUT = "Invalid input. Expected a decimal number."


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talord",
        description="Write numbers out as Danish compound numerals.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    name = subparsers.add_parser(
        "name",
        help="Print the Danish name of one or more numbers.",
    )
    name.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help=(
            "Integer or decimal number, e.g. 42, -3.5, 1e3, -1_000. "
            "Every VALUE is read as a number, including ones that start with '-'."
        ),
    )

    subparsers.add_parser(
        "repl",
        help="Read numbers from stdin, one per line, until end of input.",
    )

    serve = subparsers.add_parser(
        "serve",
        help="Run the HTTP API.",
    )
    serve.add_argument("--host", default=settings.HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_name(args: argparse.Namespace, use_case: NameNumber) -> int:
    """
    Handle `talord name`. Returns 1 if any value could not be named.
    """
    exit_code = 0
    for value in args.values:
        try:
            result = use_case.execute_text(value)
        except InvalidNumberError:
            print(f"{value}: {INVALID_INPUT}", file=sys.stderr)
            exit_code = 1
            continue
        except NumberOutOfRangeError as e:
            print(f"{value}: {e}", file=sys.stderr)
            exit_code = 1
            continue
        print(result.text)
    return exit_code


def _cmd_repl(use_case: NameNumber, stream: Optional[TextIO] = None) -> int:
    """
    Handle `talord repl`: prompt, read a line, print its name, repeat.
    """
    stream = stream or sys.stdin
    while True:
        print(PROMPT)
        line = stream.readline()
        if not line:
            break

        try:
            print(use_case.execute_text(line).text)
        except InvalidNumberError:
            print(INVALID_INPUT)
        except NumberOutOfRangeError as e:
            print(e)

        print("")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("talord.main:app", host=args.host, port=args.port)
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _values_as_positionals(argv: list[str]) -> list[str]:
    """
    Insert `--` after `name` so values such as -1e3 or -1_000 are not taken
    for options. Left alone when `--` or a help flag is already present.
    """
    if not argv or argv[0] != "name":
        return argv
    rest = argv[1:]
    if "--" in rest or {"-h", "--help"} & set(rest):
        return argv
    return ["name", "--", *rest]


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_arg_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_values_as_positionals(list(argv)))

    init_logging()

    if args.command == "name":
        exit_code = _cmd_name(args, NameNumber())
    elif args.command == "repl":
        try:
            exit_code = _cmd_repl(NameNumber())
        except KeyboardInterrupt:
            exit_code = 130
    elif args.command == "serve":
        exit_code = _cmd_serve(args)
    else:
        parser.error(f"Unknown command: {args.command}")

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
