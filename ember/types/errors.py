from __future__ import annotations


class EmberError(Exception):
    """ Base class for all Ember errors"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message
        # Filled in by Interpreter.run for the top-level form that failed
        self.form = None
        self.line: int | None = None
        self.column: int | None = None

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} at {self.line}:{self.column}"
        return self.message


class EmberSyntaxError(EmberError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class EmberUnboundSymbol(EmberError):
    """ Raised when a symbol is looked up before it is bound"""


class EmberArityError(EmberError):
    """ Raised when a special form or closure gets the wrong number of arguments"""


class EmberTypeError(EmberError):
    """ Raised when a primitive gets an operand of the wrong kind"""


class EmberInvalidSymbol(EmberTypeError):
    """ Raised when a binding name or parameter is not a symbol"""


class EmberNotCallable(EmberError):
    """ Raised when the operator position does not evaluate to a procedure"""


class EmberRecursionError(EmberError):
    """ Raised when evaluation exhausts the host call stack"""


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """Translate a character offset into a 1-based (line, column) pair."""
    line = source.count("\n", 0, offset) + 1
    last_newline = source.rfind("\n", 0, offset)
    return line, offset - last_newline
