"""Interactive read-eval-print loop.

Reads one line at a time from a Console, evaluates every form on it and
echoes the last result. `.exit` or end of input ends the session. Fatal
errors (read errors, stack overflow) abort only the current line.
"""

from __future__ import annotations

import logging

from qlisp.host import Console
from qlisp.interpreter import Interpreter
from qlisp.printer import to_source
from qlisp.types.errors import QLispReadError, QLispStackOverflow

logger = logging.getLogger(__name__)

PROMPT = ">> "
EXIT_COMMAND = ".exit"


def run_repl(itp: Interpreter, console: Console | None = None) -> None:
    console = console or itp.console
    while True:
        line = console.read_line(PROMPT)
        if line is None or line.strip() == EXIT_COMMAND:
            break
        if not line.strip():
            continue
        try:
            result = itp.eval(line)
        except (QLispReadError, QLispStackOverflow) as err:
            logger.error("%s", err)
            continue
        console.write_line(to_source(result))
