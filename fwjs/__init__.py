from fwjs.environment import Environment
from fwjs.errors import (
    ArityMismatch, DivisionByZero, DuplicateDeclaration, FWJSError, ParseError,
    RecursionDepthExceeded, TypeMismatch,
)
from fwjs.expressions import (
    AssignExpr, BinOpExpr, Expression, FunctionAppExpr, FunctionDeclExpr,
    IfExpr, Op, PrintExpr, SeqExpr, ValueExpr, VarDeclExpr, VarExpr, WhileExpr,
)
from fwjs.parser import parse
from fwjs.values import BoolVal, ClosureVal, IntVal, NullVal, Value

__version__ = "0.1.0"
