from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable

from qlisp.config import DEFAULT_MAX_CALL_DEPTH
from qlisp.host import Console, StdConsole, memory_usage

# typical Python frames per qlisp call; deeper bodies hit RecursionError first (see apply_form)
_PY_FRAMES_PER_CALL = 40


@dataclass
class RuntimeContext:
    """Mutable state of one interpreter instance.

    Passed explicitly to the evaluator and every builtin, so independent
    interpreters never share a call stack or a console.
    """

    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    console: Console = field(default_factory=StdConsole)
    memory_probe: Callable[[], int] = memory_usage
    call_depth: int = 0

    def __post_init__(self):
        needed = (self.max_call_depth + 2) * _PY_FRAMES_PER_CALL + 1000
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
