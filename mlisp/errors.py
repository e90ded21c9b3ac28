class MLispError(Exception):
    """ Base class for all mlisp errors"""
    pass

class MLispUnboundVariable(MLispError):
    """ Raised when a symbol has no binding in the environment chain"""
    def __init__(self, name: str):
        super().__init__(f"unbound variable: {name}")
        self.name = name

class MLispNotApplicable(MLispError):
    """ Raised when the head of a call form is not a callable value"""
    def __init__(self, rendered: str):
        super().__init__(f"not applicable: {rendered}")

class MLispNotEvaluable(MLispError):
    """ Raised when a value with no evaluation rule is evaluated"""
    def __init__(self, rendered: str):
        super().__init__(f"cannot evaluate expression: {rendered}")

class MLispArityShortfall(MLispError):
    """ Raised when arguments run out before parameters are bound"""
    def __init__(self, missing: list[str]):
        super().__init__(f"too few arguments; unbound parameter(s): {' '.join(missing)}")
        self.missing = missing

class MLispTokenTruncation(MLispError):
    """ Raised when a token exceeds the symbol length bound"""
    def __init__(self, kept: str, dropped: int):
        super().__init__(f"token truncated to {kept!r} ({dropped} character(s) dropped)")
        self.kept = kept
        self.dropped = dropped

class MLispSyntaxError(MLispError):
    """ Raised when the reader meets unbalanced parentheses"""
    def __init__(self, message: str):
        super().__init__(f"syntax error: {message}")

class MLispTypeError(MLispError):
    """ Raised when a form receives a value of the wrong variant"""
    def __init__(self, message: str):
        super().__init__(f"type error: {message}")

class MLispRecursionDepth(MLispError):
    """ Raised when reading or evaluating nests deeper than the Python stack allows"""
    def __init__(self, limit: int):
        super().__init__(f"recursion too deep: nesting exceeds the depth limit of {limit}")
        self.limit = limit

# Silent kinds are logged but never written to the error port.
SILENT_ERRORS = (MLispArityShortfall, MLispTokenTruncation)
