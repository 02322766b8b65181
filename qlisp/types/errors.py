class QLispError(Exception):
    """ Base class for all qlisp errors"""
    pass


# -------------------------------
# Fatal: reading
# -------------------------------
class QLispReadError(QLispError):
    """ Raised when source text cannot be read; aborts the run"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column


class QLispUnexpectedEof(QLispReadError):
    """ Raised when input ends inside a list or string"""


class QLispInvalidCharacter(QLispReadError):
    """ Raised when a character belongs to no token class"""


class QLispNumberOutOfRange(QLispReadError):
    """ Raised when a number literal does not fit in 32 bits"""


class QLispNestingTooDeep(QLispReadError):
    """ Raised when lists nest deeper than the host stack allows"""


# -------------------------------
# Recoverable: evaluation
# -------------------------------
class QLispEvalError(QLispError):
    """ Base class for errors reported and replaced by nil during evaluation"""


class QLispArityError(QLispEvalError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""


class QLispTypeError(QLispEvalError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class QLispNotCallable(QLispEvalError):
    """ Raised when the operator of a call form is not a function"""


class QLispMalformedVariadic(QLispEvalError):
    """ Raised when the `.` variadic marker is misplaced"""


class QLispDivisionByZero(QLispEvalError):
    """ Raised when dividing by zero"""


# -------------------------------
# Fatal: resources
# -------------------------------
class QLispStackOverflow(QLispError):
    """ Raised when the call stack exceeds its configured maximum"""
