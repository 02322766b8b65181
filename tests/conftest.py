import pytest

from qlisp.interpreter import Interpreter


class RecordingConsole:
    """Console double: scripted input lines, captured output lines."""

    def __init__(self, lines=()):
        self.inputs = list(lines)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    def write_line(self, text):
        self.output.append(text)


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def interp(console):
    """Interpreter with builtins only (no bootstrap library)."""
    return Interpreter(stdlib=None, console=console)


@pytest.fixture
def std_interp(console, monkeypatch):
    """Interpreter with the packaged stdlib/basic.lisp loaded."""
    monkeypatch.delenv("QLISP_STDLIB_PATH", raising=False)
    return Interpreter(console=console)
