"""Host collaborators used at the outer edge of the interpreter.

- SourceLoader: produces raw program text given a path.
- Console: line-oriented input/output for the REPL and `print`.
- memory_usage: process memory accounting for `memtotal`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO

import psutil


class SourceLoader(Protocol):
    def read(self, path: str | Path) -> str: ...


class Console(Protocol):
    def read_line(self, prompt: str = "") -> Optional[str]: ...
    def write_line(self, text: str) -> None: ...


class FileSourceLoader:
    """Reads UTF-8 program text from the filesystem; raises OSError on failure."""

    def read(self, path: str | Path) -> str:
        return Path(path).read_text(encoding="utf-8")


class StdConsole:
    """Console over text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin
        self.stdout = stdout

    def read_line(self, prompt: str = "") -> Optional[str]:
        out = self.stdout or sys.stdout
        inp = self.stdin or sys.stdin
        if prompt:
            out.write(prompt)
            out.flush()
        line = inp.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write_line(self, text: str) -> None:
        out = self.stdout or sys.stdout
        out.write(text)
        out.write("\n")
        out.flush()


def memory_usage() -> int:
    """Resident set size of the current process in bytes."""
    return psutil.Process().memory_info().rss
