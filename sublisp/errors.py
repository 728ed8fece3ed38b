

class SublispError(Exception):
    """ Base class for all sublisp errors"""
    pass


class ParseError(SublispError):
    """ Raised when the reader meets malformed or unterminated input"""


class SymbolTooLong(ParseError):
    """ Raised when a symbol name exceeds the interner's maximum length"""


class EvalError(SublispError):
    """ Base class for errors raised while evaluating a form"""


class UndefinedVariable(EvalError):
    """ Raised when a symbol is looked up before it is defined"""


class NotCallable(EvalError):
    """ Raised when the head of a call is nil or not a builtin/lambda"""


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class TypeMismatch(EvalError):
    """ Raised when an argument has the wrong value type"""


class InvalidTruthValue(EvalError):
    """ Raised when a condition is neither the true nor the false symbol"""


class RecursionDepthExceeded(EvalError):
    """ Raised when reading or evaluation exhausts the host call stack"""


class InternalInvariantViolation(SublispError):
    """ Raised when a structural invariant of the value graph is broken"""
