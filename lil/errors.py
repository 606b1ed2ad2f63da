class LilError(Exception):
    """ Base class for all lil errors"""
    pass

class LilLexError(LilError):
    """ Raised when the source text cannot be split into tokens"""
    pass

class LilParseError(LilError):
    """ Raised when the token stream does not form exactly one expression"""
    pass

class LilRuntimeError(LilError):
    """ Base class for errors raised while evaluating"""
    pass

class LilArityError(LilRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LilNotCallableError(LilRuntimeError):
    """ Raised when a non-callable value is applied to arguments"""

class LilTypeError(LilRuntimeError):
    """ Raised when the types of arguments passed to a form are incorrect"""

class LilEmptyListError(LilRuntimeError):
    """ Raised when the head of an empty list is requested"""

class LilDuplicateBindingError(LilRuntimeError):
    """ Raised when a name is bound twice in the same frame"""
