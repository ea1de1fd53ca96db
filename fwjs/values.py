import logging

from fwjs.errors import ArityMismatch

logger = logging.getLogger(__name__)


class Value:
    __slots__ = ()

    def typeName(self):
        return type(self).__name__[:-3]

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)


class IntVal(Value):
    __slots__ = ("i",)

    def __init__(self, i):
        object.__setattr__(self, "i", int(i))

    def toInt(self):
        return self.i

    def __eq__(self, other):
        return isinstance(other, IntVal) and self.i == other.i

    def __hash__(self):
        return hash(("Int", self.i))

    def __str__(self):
        return str(self.i)

    def __repr__(self):
        return "IntVal(%d)" % self.i


class BoolVal(Value):
    __slots__ = ("b",)

    def __init__(self, b):
        object.__setattr__(self, "b", bool(b))

    def toBoolean(self):
        return self.b

    def __eq__(self, other):
        return isinstance(other, BoolVal) and self.b == other.b

    def __hash__(self):
        return hash(("Bool", self.b))

    def __str__(self):
        return "true" if self.b else "false"

    def __repr__(self):
        return "BoolVal(%s)" % self.b


class NullVal(Value):
    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, NullVal)

    def __hash__(self):
        return hash("Null")

    def __str__(self):
        return "null"

    def __repr__(self):
        return "NullVal()"


class ClosureVal(Value):
    """A function together with the environment it was defined in.

    The environment is shared, not copied: later updates to the defining
    scope are visible when the body runs.
    """

    __slots__ = ("params", "body", "outerEnv")

    def __init__(self, params, body, outerEnv):
        object.__setattr__(self, "params", tuple(params))
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "outerEnv", outerEnv)

    def apply(self, args):
        if len(args) != len(self.params):
            raise ArityMismatch(len(self.params), len(args))
        logger.debug("applying %s to %d argument(s)", self, len(args))
        newEnv = self.outerEnv.newScope()
        for (name, arg) in zip(self.params, args):
            newEnv.declareVar(name, arg)
        return self.body.evaluate(newEnv)

    def __str__(self):
        return "function(%s) {...};" % ",".join(self.params)

    def __repr__(self):
        return "ClosureVal(%r)" % (self.params,)
