from enum import Enum

from fwjs.errors import DivisionByZero, TypeMismatch
from fwjs.values import BoolVal, ClosureVal, IntVal, NullVal


class Op(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    EQ = "=="


def expectInt(value, context):
    if not isinstance(value, IntVal): raise TypeMismatch("Int", value.typeName(), context)
    return value.toInt()


def expectBool(value, context):
    if not isinstance(value, BoolVal): raise TypeMismatch("Bool", value.typeName(), context)
    return value.toBoolean()


def truncDiv(a, b):
    # Rounds toward zero, unlike Python's floor division.
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


class Expression:
    """A node of the program tree. Trees are built once and never mutated."""

    def evaluate(self, env):
        raise NotImplementedError


class ValueExpr(Expression):
    def __init__(self, val):
        self.val = val

    def evaluate(self, env):
        return self.val


class VarExpr(Expression):
    def __init__(self, varName):
        self.varName = varName

    def evaluate(self, env):
        return env.resolveVar(self.varName)


class PrintExpr(Expression):
    def __init__(self, exp):
        self.exp = exp

    def evaluate(self, env):
        value = self.exp.evaluate(env)
        print(value)
        return value


class BinOpExpr(Expression):
    def __init__(self, op, e1, e2):
        self.op = op
        self.e1 = e1
        self.e2 = e2

    def evaluate(self, env):
        op = self.op
        val1 = expectInt(self.e1.evaluate(env), "left of '%s'" % op.value)
        val2 = expectInt(self.e2.evaluate(env), "right of '%s'" % op.value)
        if op is Op.ADD: return IntVal(val1 + val2)
        elif op is Op.SUBTRACT: return IntVal(val1 - val2)
        elif op is Op.MULTIPLY: return IntVal(val1 * val2)
        elif op is Op.DIVIDE or op is Op.MOD:
            if val2 == 0: raise DivisionByZero(op.value)
            q = truncDiv(val1, val2)
            if op is Op.DIVIDE: return IntVal(q)
            return IntVal(val1 - val2 * q)
        elif op is Op.GT: return BoolVal(val1 > val2)
        elif op is Op.GE: return BoolVal(val1 >= val2)
        elif op is Op.LT: return BoolVal(val1 < val2)
        elif op is Op.LE: return BoolVal(val1 <= val2)
        elif op is Op.EQ: return BoolVal(val1 == val2)
        raise AssertionError("Unexpected operator: %r" % op)


class IfExpr(Expression):
    """Unlike JS, if is an expression: its value is the chosen branch's value."""

    def __init__(self, cond, thn, els):
        self.cond = cond
        self.thn = thn
        self.els = els

    def evaluate(self, env):
        if expectBool(self.cond.evaluate(env), "if condition"):
            return self.thn.evaluate(env)
        return self.els.evaluate(env)


class WhileExpr(Expression):
    def __init__(self, cond, body):
        self.cond = cond
        self.body = body

    def evaluate(self, env):
        value = NullVal()
        while expectBool(self.cond.evaluate(env), "while condition"):
            value = self.body.evaluate(env)
        return value


class SeqExpr(Expression):
    def __init__(self, e1, e2):
        self.e1 = e1
        self.e2 = e2

    def evaluate(self, env):
        # Statement lists nest to the right; walk the spine instead of recursing.
        e = self
        while isinstance(e, SeqExpr):
            e.e1.evaluate(env)
            e = e.e2
        return e.evaluate(env)


class VarDeclExpr(Expression):
    def __init__(self, varName, exp):
        self.varName = varName
        self.exp = exp

    def evaluate(self, env):
        value = self.exp.evaluate(env)
        env.declareVar(self.varName, value)
        return value


class AssignExpr(Expression):
    """Updates an existing variable, or creates a global if there is none."""

    def __init__(self, varName, e):
        self.varName = varName
        self.e = e

    def evaluate(self, env):
        value = self.e.evaluate(env)
        env.updateVar(self.varName, value)
        return value


class FunctionDeclExpr(Expression):
    """Evaluates to a closure over the current environment.

    The closure is also bound under its own rendering, e.g.
    ``function(x) {...};``, using assignment rules.
    """

    def __init__(self, params, body):
        self.params = list(params)
        self.body = body

    def evaluate(self, env):
        closure = ClosureVal(self.params, self.body, env)
        env.updateVar(str(closure), closure)
        return closure


class FunctionAppExpr(Expression):
    def __init__(self, f, args):
        self.f = f
        self.args = list(args)

    def evaluate(self, env):
        closure = self.f.evaluate(env)
        if not isinstance(closure, ClosureVal):
            raise TypeMismatch("Closure", closure.typeName(), "function application")
        argValues = []
        for arg in self.args:
            argValues.append(arg.evaluate(env))
        return closure.apply(argValues)
