class QuillError(Exception):
    """ Base class for all Quill errors"""
    pass


class QuillUnboundSymbol(QuillError):
    """ Raised when a symbol lookup exhausts the environment chain"""

    def __init__(self, symbol, message: str | None = None):
        super().__init__(message or f"Symbol {symbol} is not defined")
        self.symbol = symbol


class QuillInvalidSymbol(QuillError):
    """ Raised when something other than a symbol is used as a binding name"""


class QuillArityError(QuillError):
    """ Raised when a closure, macro or primitive is invoked with the wrong number of arguments"""

    def __init__(self, message: str, form=None):
        super().__init__(message)
        self.form = form


class QuillNotCallable(QuillError):
    """ Raised when the head of a list form is not a closure, macro or primitive"""

    def __init__(self, value, message: str | None = None):
        super().__init__(message or f"{value!r} is not callable")
        self.value = value


class QuillMalformedSpecialForm(QuillError):
    """ Raised when a special form is used with the wrong shape"""

    def __init__(self, message: str, form=None):
        super().__init__(message)
        self.form = form


class QuillTypeError(QuillError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""


class QuillArithmeticError(QuillError):
    """ Raised when an arithmetic primitive has no defined result, e.g. division by zero"""


class QuillRecursionError(QuillError):
    """ Raised when evaluation nests deeper than the interpreter stack allows"""

    def __init__(self, message: str, form=None):
        super().__init__(message)
        self.form = form


class QuillSyntaxError(QuillError):
    """ Raised when the reader cannot parse source text"""


class QuillIOError(QuillError):
    """ Raised when a file cannot be read"""
