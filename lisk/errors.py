class LiskError(Exception):
    """ Base class for all Lisk errors"""
    pass

class LiskParseError(LiskError):
    """ Raised when program text is malformed or a special form has the wrong shape"""
    pass

class LiskInvalidSymbol(LiskError):
    """ Raised when something other than a symbol is used as a binding name"""
    pass

class LiskUnboundSymbol(LiskError):
    """ Raised when a symbol is looked up or set before it is bound"""
    pass

class LiskTypeError(LiskError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class LiskArityError(LiskError):
    """ Raised when the number of arguments passed to a procedure or form is incorrect"""

class LiskEmptyCall(LiskError):
    """ Raised when the empty list is evaluated as a call"""

class LiskNotCallable(LiskError):
    """ Raised when the head of a call does not evaluate to a procedure"""

class LiskDivideByZero(LiskError):
    """ Raised on integral division by zero"""
