"""typedexpr - A tiny statically typed language of integers and booleans."""

from typedexpr.errors import (
    EvalError,
    IncompatibleOperandsError,
    OperandMismatchError,
    TypeCheckError,
)
from typedexpr.evaluate import (
    BoolValue,
    EvalOptions,
    EvalResult,
    Evaluator,
    IntValue,
    RuntimeValue,
    evaluate,
)
from typedexpr.expression import (
    Add,
    And,
    BoolLiteralFalse,
    BoolLiteralTrue,
    Expr,
    IntLiteralOne,
    IntLiteralZero,
    Multiply,
    Or,
    render,
)
from typedexpr.interpreter import Interpreter
from typedexpr.nodes import Node
from typedexpr.serialization import (
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from typedexpr.typecheck import (
    TypeChecker,
    TypeCheckResult,
    typecheck,
)
from typedexpr.types import (
    BooleanType,
    BoolType,
    IntegerType,
    IntType,
    Type,
    type_name,
)

__all__ = [
    # Expressions
    "Add",
    "And",
    "BoolLiteralFalse",
    "BoolLiteralTrue",
    # Types
    "BoolType",
    "BoolValue",
    "BooleanType",
    # Evaluation
    "EvalError",
    "EvalOptions",
    "EvalResult",
    "Evaluator",
    "Expr",
    "IncompatibleOperandsError",
    "IntLiteralOne",
    "IntLiteralZero",
    "IntType",
    "IntValue",
    "IntegerType",
    "Interpreter",
    "Multiply",
    "Node",
    "OperandMismatchError",
    "Or",
    "RuntimeValue",
    "Type",
    # Type checking
    "TypeCheckError",
    "TypeCheckResult",
    "TypeChecker",
    "evaluate",
    # Serialization
    "from_dict",
    "from_json",
    "render",
    "to_dict",
    "to_json",
    "type_name",
    "typecheck",
]
