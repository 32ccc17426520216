#!/usr/bin/env python3
"""
Listing and self-check for the array functions.

    python -m arrays list [--category transforms]
    python -m arrays check
"""
import argparse
import sys
from typing import List, Optional

from .config import setup_logging
from .discovery import builtin_functions, check_examples


def cmd_list(args) -> int:
    for entry in builtin_functions(args.category):
        print(f"{entry.full_name:<40} {entry.description}")
    return 0


def cmd_check(args) -> int:
    failures = check_examples()
    for failure in failures:
        detail = failure.error or f"got {failure.actual!r}"
        print(f"FAIL {failure.full_name}({failure.input!r}): expected {failure.expected!r}, {detail}")
    total = sum(len(entry.examples) for entry in builtin_functions())
    print(f"{total - len(failures)}/{total} examples passed")
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arrays", description="Array function self-check")
    parser.add_argument("--log-level", default=None, help="Override ARRAYS_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List the functions")
    p_list.add_argument("--category", default=None)
    p_list.set_defaults(func=cmd_list)

    p_check = sub.add_parser("check", help="Run every documented example")
    p_check.set_defaults(func=cmd_check)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper() if args.log_level else None)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
