class LispError(Exception):
    """ Base class for all pairlisp errors"""
    pass

# -------------------------------
# Reader errors
# -------------------------------
class LispSyntaxError(LispError):
    """ Raised when a line of source text cannot be read"""

class LispEmptyExpression(LispSyntaxError):
    """ Raised when there is no expression to read"""

class LispUnexpectedClose(LispSyntaxError):
    """ Raised when ')' appears where an expression is expected"""

class LispUnterminatedList(LispSyntaxError):
    """ Raised when input ends before a list is closed"""

class LispTrailingGarbage(LispSyntaxError):
    """ Raised when tokens remain after the first complete expression"""

# -------------------------------
# Evaluation errors
# -------------------------------
class LispRuntimeError(LispError):
    """ Base class for errors raised while evaluating an expression"""

class LispUnboundVariable(LispRuntimeError):
    """ Raised when a symbol is looked up before it is bound"""

class LispTypeMismatch(LispRuntimeError):
    """ Raised when a value has the wrong type for a procedure or special form"""

class LispMalformedForm(LispRuntimeError):
    """ Raised when a form does not have the shape its operator requires"""

class LispArityMismatch(LispRuntimeError):
    """ Raised when a procedure receives the wrong number of arguments"""

class LispDivisionByZero(LispRuntimeError, ZeroDivisionError):
    """ Raised when an integer is divided by zero"""

class LispEvaluationError(LispRuntimeError):
    """ Raised when the evaluator meets a value the reader can never produce"""
