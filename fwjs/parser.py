import logging

from lark import Lark, Transformer, exceptions

from fwjs.errors import ParseError
from fwjs.expressions import (
    AssignExpr, BinOpExpr, FunctionAppExpr, FunctionDeclExpr, IfExpr, Op,
    PrintExpr, SeqExpr, ValueExpr, VarDeclExpr, VarExpr, WhileExpr,
)
from fwjs.values import BoolVal, IntVal, NullVal

logger = logging.getLogger(__name__)

grammar = r'''
start: body

body: stmt* tail?

?stmt: simple ";"
    | compound
    | ";" -> empty

?tail: simple
    | "return" expr ";"? -> ret

?simple: ("var" | "let") ID "=" expr -> vardecl
    | "print" "(" expr ")" -> print
    | expr

?compound: ifstmt
    | "while" "(" expr ")" block -> whilestmt
    | "function" ID "(" params ")" block -> fundecl

ifstmt: "if" "(" expr ")" block ("else" (block | ifstmt))?

?block: "{" body "}"

?expr: ID "=" expr -> assign
    | comparison

?comparison: sum
    | sum compop sum -> binop

?sum: product
    | sum addop product -> binop

?product: unary
    | product mulop unary -> binop

?unary: call
    | "-" unary -> negative

?call: atom
    | call "(" args ")" -> app

?atom: INT -> int
    | "true" -> truelit
    | "false" -> falselit
    | "null" -> nulllit
    | ID -> var
    | "function" "(" params ")" block -> funexpr
    | "(" expr ")"

params: (ID ("," ID)*)?

args: (expr ("," expr)*)?

!compop: "==" | "<=" | ">=" | "<" | ">"
!addop: "+" | "-"
!mulop: "*" | "/" | "%"

ID: /[_a-zA-Z][_a-zA-Z0-9]*/
INT: /[0-9]+/
COMMENT: /\/\/[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
'''

parser = Lark(grammar, parser="lalr")


def nullExpr():
    return ValueExpr(NullVal())


class ExpressionBuilder(Transformer):
    """Turns a parse tree into an Expression tree."""

    def start(self, children):
        return children[0]

    def body(self, children):
        exprs = [c for c in children if c is not None]
        if len(exprs) == 0: return nullExpr()
        result = exprs[-1]
        for e in reversed(exprs[:-1]):
            result = SeqExpr(e, result)
        return result

    def empty(self, children):
        return None

    def ret(self, children):
        return children[0]

    def vardecl(self, children):
        (name, e) = children
        return VarDeclExpr(str(name), e)

    def print(self, children):
        return PrintExpr(children[0])

    def whilestmt(self, children):
        (cond, body) = children
        return WhileExpr(cond, body)

    def fundecl(self, children):
        (name, params, body) = children
        return VarDeclExpr(str(name), FunctionDeclExpr(params, body))

    def ifstmt(self, children):
        if len(children) == 3:
            (cond, thn, els) = children
        else:
            (cond, thn) = children
            els = nullExpr()
        return IfExpr(cond, thn, els)

    def assign(self, children):
        (name, e) = children
        return AssignExpr(str(name), e)

    def binop(self, children):
        (e1, op, e2) = children
        return BinOpExpr(op, e1, e2)

    def compop(self, children):
        return Op(str(children[0]))

    def addop(self, children):
        return Op(str(children[0]))

    def mulop(self, children):
        return Op(str(children[0]))

    def negative(self, children):
        e = children[0]
        if isinstance(e, ValueExpr) and isinstance(e.val, IntVal):
            return ValueExpr(IntVal(-e.val.toInt()))
        return BinOpExpr(Op.SUBTRACT, ValueExpr(IntVal(0)), e)

    def app(self, children):
        (f, args) = children
        return FunctionAppExpr(f, args)

    def int(self, children):
        return ValueExpr(IntVal(int(children[0])))

    def truelit(self, children):
        return ValueExpr(BoolVal(True))

    def falselit(self, children):
        return ValueExpr(BoolVal(False))

    def nulllit(self, children):
        return nullExpr()

    def var(self, children):
        return VarExpr(str(children[0]))

    def funexpr(self, children):
        (params, body) = children
        return FunctionDeclExpr(params, body)

    def params(self, children):
        return [str(name) for name in children]

    def args(self, children):
        return list(children)


def parse(code):
    try:
        tree = parser.parse(code)
    except exceptions.LarkError as e:
        raise ParseError("Syntax error: %s" % e) from e
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parsed program:\n%s", tree.pretty())
    return ExpressionBuilder().transform(tree)
