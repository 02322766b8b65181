from __future__ import annotations

import argparse
import logging
import sys

from qlisp.config import LOG_LEVELS, get_log_level
from qlisp.interpreter import Interpreter
from qlisp.repl import run_repl
from qlisp.types.errors import QLispReadError, QLispStackOverflow

logger = logging.getLogger("qlisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qlisp", description="Run qlisp programs or start a REPL.")
    parser.add_argument("files", nargs="*", help="program files to run in order; REPL when omitted")
    parser.add_argument("--no-stdlib", action="store_true", help="do not load stdlib/basic.lisp")
    parser.add_argument("--max-call-depth", type=int, default=None, help="call stack limit")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="diagnostic level (default: QLISP_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        level = args.log_level or get_log_level()
    except ValueError as err:
        parser.error(str(err))
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        itp = Interpreter(
            stdlib=None if args.no_stdlib else 'auto',
            max_call_depth=args.max_call_depth,
        )
        if not args.files:
            run_repl(itp)
            return 0
        for path in args.files:
            itp.load_file(path)
    except (QLispReadError, QLispStackOverflow) as err:
        logger.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
