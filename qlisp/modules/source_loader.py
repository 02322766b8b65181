from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from qlisp.config import get_stdlib_path
from qlisp.host import SourceLoader

logger = logging.getLogger(__name__)


class _HasEvalSource(Protocol):
    loader: SourceLoader

    def eval_source(self, code: str) -> None: ...


def load_source(itp: _HasEvalSource, path: str | Path) -> bool:
    """Read `path` through the interpreter's loader and evaluate every form.

    A file that cannot be read is reported and skipped (returns False);
    read errors and stack overflows inside the file propagate.
    """
    try:
        code = itp.loader.read(path)
    except OSError as err:
        logger.error("Couldn't load file at %s, skipping (%s)", path, err)
        return False
    logger.debug("Loading %s", path)
    itp.eval_source(code)
    return True


def load_stdlib(itp: _HasEvalSource) -> bool:
    """Bootstrap library (stdlib/basic.lisp unless QLISP_STDLIB_PATH says otherwise)."""
    return load_source(itp, get_stdlib_path())
