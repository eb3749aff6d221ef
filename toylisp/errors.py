
class ToyError(Exception):
    """ Base class for all toylisp errors"""
    pass


class ToySyntaxError(ToyError):
    """ Raised when source text or a core form is malformed"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position


class ToyUnknownFormError(ToySyntaxError):
    """ Raised when a reserved form has the wrong shape, or `()` is used as an expression"""


class ToyUnboundNameError(ToyError):
    """ Raised when a name is referenced but bound in no enclosing frame"""

    def __init__(self, name):
        super().__init__(f"Unbound name: {name}")
        self.name = name


class ToyRebindError(ToyError):
    """ Raised when a name is bound twice in the same frame"""

    def __init__(self, name):
        super().__init__(f"Name already bound in this scope: {name}")
        self.name = name


class ToyDuplicateParamError(ToyError):
    """ Raised when a parameter list repeats a name"""

    def __init__(self, name):
        super().__init__(f"Duplicate parameter: {name}")
        self.name = name


class ToyArityError(ToyError):
    """ Raised when a call or a core form gets the wrong number of arguments"""


class ToyNotCallableError(ToyError):
    """ Raised when the callee of an application is not a function"""


class ToyTypeError(ToyError):
    """ Raised when a primitive receives an argument of the wrong kind"""


class ToyArithmeticError(ToyError):
    """ Raised on division by zero"""


class ToyEmptySequenceError(ToyError):
    """ Raised when a sequence with no body reaches the evaluator"""


class ToyResourceExhaustedError(ToyError):
    """ Raised when evaluation nests deeper than the configured limit"""
