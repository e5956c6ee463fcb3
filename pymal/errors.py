

class MalError(Exception):
    """ Base class for all pymal errors"""
    pass

class MalSyntaxError(MalError):
    """ Raised by the reader on a malformed token stream"""

class MalEOFError(MalSyntaxError):
    """ Raised when the input ends in the middle of a form"""

class MalEvalError(MalError):
    """ Base class for errors raised while evaluating a form"""

class MalInvalidSymbol(MalEvalError):
    """ Raised when a binding name is not a symbol"""

class MalUnboundSymbol(MalEvalError):
    """ Raised when a symbol is used before it is bound"""

class MalArityError(MalEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MalTypeError(MalEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MalZeroDivisionError(MalEvalError):
    """ Raised when a primitive divides by zero"""
