"""Error taxonomy for mal.

Reader errors describe malformed or incomplete source text. Runtime errors
are raised while evaluating a well-formed form. The two families only meet
at the `MalError` root so a front end can tell "needs more input" apart from
"the program is wrong".
"""


class MalError(Exception):
    """ Base class for all mal errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class MalReaderError(MalError):
    """ Raised when source text cannot be read into a form"""
    pass


class MalUnbalancedList(MalReaderError):
    """ Raised when a list is not closed, or a ')' has no opener"""

    def __init__(self, message: str = "EOF while parsing List"):
        super().__init__(message)


class MalUnbalancedArray(MalReaderError):
    """ Raised when an array is not closed, or a ']' has no opener"""

    def __init__(self, message: str = "EOF while parsing Array"):
        super().__init__(message)


class MalUnbalancedMap(MalReaderError):
    """ Raised when a map is not closed, or a '}' has no opener"""

    def __init__(self, message: str = "EOF while parsing Map"):
        super().__init__(message)


class MalQuoteError(MalReaderError):
    """ Raised for an unterminated or badly escaped string"""

    def __init__(self, detail: str):
        super().__init__(f"Quote error, {detail}")
        self.detail = detail


class MalNoMoreTokens(MalReaderError):
    """ Raised when the reader runs out of tokens"""

    def __init__(self, message: str = "No more tokens in the tokenizer"):
        super().__init__(message)


class MalNestingTooDeep(MalReaderError):
    """ Raised when forms nest deeper than the Python stack can read"""

    def __init__(self, message: str = "Forms nested too deeply to read"):
        super().__init__(message)


# -------------------------------
# Runtime errors
# -------------------------------
class MalRuntimeError(MalError):
    """ Base class for errors raised during evaluation"""
    pass


class MalEvaluationError(MalRuntimeError):
    """ Raised when a form cannot be evaluated"""
    pass


class MalArityError(MalEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MalTypeError(MalEvaluationError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class MalInvalidSymbol(MalEvaluationError):
    """ Raised when a non-symbol is used where a symbol is required"""


class MalValueNotFound(MalRuntimeError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"Symbol {symbol} is not defined")
        self.symbol = symbol
