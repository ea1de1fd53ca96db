class FWJSError(Exception):
    pass


class TypeMismatch(FWJSError):
    def __init__(self, expected, got, context=None):
        ctx = " (%s)" % context if context else ""
        super().__init__("Type error%s: Expected %s, got %s" % (ctx, expected, got))
        self.expected = expected
        self.got = got


class DuplicateDeclaration(FWJSError):
    def __init__(self, name):
        super().__init__("Variable already defined: %s" % name)
        self.name = name


class DivisionByZero(FWJSError):
    def __init__(self, op):
        super().__init__("Division by zero: '%s'" % op)


class ArityMismatch(FWJSError):
    def __init__(self, expected, got):
        super().__init__("Arity error: Expected %s arguments, got %s" % (expected, got))
        self.expected = expected
        self.got = got


class ParseError(FWJSError):
    pass


class RecursionDepthExceeded(FWJSError):
    def __init__(self, limit):
        super().__init__("Maximum call depth exceeded (recursion limit %d)" % limit)
        self.limit = limit
