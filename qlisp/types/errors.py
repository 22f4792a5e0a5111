class QlispError(Exception):
    """ Base class for all qlisp errors"""
    pass


class QlispSyntaxError(QlispError):
    """ Raised by the reader on malformed input. Fatal: the reader cannot resume."""

    def __init__(self, message: str, file_name: str = "<input>", line: int = 0, col: int = 0):
        super().__init__(message)
        self.message = message
        self.file_name = file_name
        self.line = line
        self.col = col

    def __str__(self):
        return f"{self.file_name}:{self.line}:{self.col}: {self.message}"


class QlispRuntimeError(QlispError):
    """ Recoverable error: reported, and the failing expression yields nil"""
    pass


class QlispUnboundSymbol(QlispRuntimeError):
    """ Raised when a symbol is used before it is bound"""


class QlispArityError(QlispRuntimeError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""


class QlispTypeError(QlispRuntimeError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class QlispNotCallable(QlispRuntimeError):
    """ Raised when the operator position of a call form is not a function"""


class QlispCallDepthError(QlispRuntimeError):
    """ Raised when nested user-defined calls exceed the configured maximum"""


class QlispArgumentError(QlispRuntimeError):
    """ Raised when the variadic dot is misplaced in a definition or a call"""


class QlispZeroDivisionError(QlispRuntimeError):
    """ Raised on integer division by zero"""
