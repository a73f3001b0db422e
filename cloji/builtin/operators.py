"""Operators for the Cloji core library.

Every binary operator left-folds over all of its operands, evaluating them
left to right: (op a b c) is op(op(a, b), c). Operators are language
functions, so they receive raw nodes and evaluate them here.
"""
from __future__ import annotations

import operator
from numbers import Number
from typing import Any, Callable, Sequence

from cloji import HostValue
from cloji.errors import ClojiArityError
from cloji.evaluation.evaluator import evaluate
from cloji.types.function import SpecialForm
from cloji.types.node import Node
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined, is_nullish


def strict_equals(a: Any, b: Any) -> bool:
    """Numbers and strings compare by value, everything else by identity.

    Booleans never equal numbers, unlike Python's `True == 1`.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, Number) and isinstance(b, Number):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return a is b


def strict_not_equals(a: Any, b: Any) -> bool:
    return not strict_equals(a, b)


def logical_and(a: Any, b: Any) -> Any:
    return a and b


def logical_or(a: Any, b: Any) -> Any:
    return a or b


def nullish_coalesce(a: Any, b: Any) -> Any:
    return b if is_nullish(a) else a


def apply_binary_op(scope: Scope, items: Sequence[Node], op: Callable[[Any, Any], Any]) -> HostValue:
    if not items:
        return Undefined
    first, *rest = items
    result = evaluate(scope, first)
    for item in rest:
        result = op(result, evaluate(scope, item))
    return result


def binary_operator(name: str, op: Callable[[Any, Any], Any]) -> SpecialForm:
    def form(scope: Scope, *items: Node) -> HostValue:
        return apply_binary_op(scope, items, op)

    form.__name__ = f"op_{name}"
    return SpecialForm(name, form)


def not_form(scope: Scope, operand: Node | None = None, *extra: Node) -> bool:
    if extra:
        raise ClojiArityError("not requires exactly 1 argument")
    return not evaluate(scope, operand)


BINARY_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "=": strict_equals,
    "not=": strict_not_equals,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "and": logical_and,
    "or": logical_or,
    "??": nullish_coalesce,
}

OPERATORS: dict[str, SpecialForm] = {
    name: binary_operator(name, op) for name, op in BINARY_OPERATORS.items()
}
OPERATORS["not"] = SpecialForm("not", not_form)
