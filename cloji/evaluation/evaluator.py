"""Core tree-walking evaluator for the Cloji interpreter.

Dispatches on node type, builds object/array literals structurally (with
`&name` spreads), destructures patterns for `def`/`set`/`fn`, and annotates
errors with one diagnostic frame per enclosing s-expression as they unwind.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Sequence

from cloji import HostValue
from cloji.errors import InvalidSyntaxError, NotCallableError, NotIterableError, push_frame
from cloji.evaluation.object_path import get_property, own_properties
from cloji.types.function import is_language_function
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined, is_nullish

KEYWORDS: dict[str, Any] = {
    "true": True,
    "false": False,
    "nil": None,
    "void": Undefined,
}


def parse_number(text: str) -> int | float:
    if text.startswith(("0x", "0X")):
        return int(text, 16)
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


def evaluate(scope: Scope, node: Node | None) -> HostValue:
    """Evaluate a single node against `scope`."""
    if node is None:
        return Undefined
    if not isinstance(node, Node):
        raise InvalidSyntaxError(f"Invalid node {node!r}")

    match node.type:
        case NodeType.JS:
            return node.value
        case NodeType.STRING:
            return str(node.value)
        case NodeType.NUMBER:
            return parse_number(node.value)
        case NodeType.KEY | NodeType.REST:
            # Self-evaluating: the consuming construct reads `.value`.
            return node
        case NodeType.KEYWORD:
            return KEYWORDS[node.value]
        case NodeType.ARRAY:
            return struct_array(scope, node.value)
        case NodeType.OBJECT:
            return struct_object(scope, node.value)
        case NodeType.IDENT:
            return scope.get(node.value)
        case NodeType.SEXPR:
            return evaluate_call(scope, node)

    raise InvalidSyntaxError(f"Invalid syntax {node.value!r}")


def evaluate_call(scope: Scope, node: Node) -> HostValue:
    if not node.value:
        raise InvalidSyntaxError(f"Cannot evaluate an empty expression at line {node.line}")
    head, *args = node.value
    try:
        # Identifier heads resolve by name; any other head is evaluated and re-dispatched.
        if head.type is NodeType.IDENT:
            func = scope.get(head.value)
        else:
            func = evaluate(scope, head)

        if is_language_function(func):
            return func.invoke(scope, *args)
        if not callable(func):
            raise NotCallableError(f"{_describe(head)} is not a function")
        return func(*struct_array(scope, args))
    except Exception as err:
        push_frame(err, node)
        raise


def _describe(node: Node) -> str:
    return node.value if isinstance(node.value, str) else node.type.value


def eval_list(scope: Scope, nodes: Iterable[Node]) -> list[HostValue]:
    return [evaluate(scope, node) for node in nodes]


def execute_block(scope: Scope, program: Sequence[Node]) -> HostValue:
    """Evaluate `program` in order and return the last value."""
    result: HostValue = Undefined
    for node in program:
        result = evaluate(scope, node)
    return result


# ---------------------------------
# Structural construction
# ---------------------------------
def is_iterable(value: Any) -> bool:
    """Mappings behave as plain objects here and are not iterable."""
    return not is_nullish(value) and not isinstance(value, Mapping) and isinstance(value, Iterable)


def struct_object(scope: Scope, items: Sequence[Node]) -> dict[str, HostValue]:
    """Build a dict from `:key value` pairs and `&name` spreads; later entries win.

    A key followed by another key, a spread or the end of the items is a flag
    and maps to `Undefined`.
    """
    result: dict[str, HostValue] = {}
    i = 0
    while i < len(items):
        item = items[i]
        if item.type is NodeType.REST:
            result.update(own_properties(scope.get(item.value)))
        elif item.type is NodeType.KEY:
            next_item = items[i + 1] if i + 1 < len(items) else None
            if next_item is None or next_item.type in (NodeType.KEY, NodeType.REST):
                result[item.value] = Undefined
            else:
                result[item.value] = evaluate(scope, next_item)
                i += 1
        i += 1
    return result


def struct_array(scope: Scope, items: Sequence[Node]) -> list[HostValue]:
    """Build a list, splicing `&name` spreads in place.

    A spread source must be iterable (mappings are not), but only lists and
    tuples contribute elements; other iterables (strings, generators) add nothing.
    """
    result: list[HostValue] = []
    for item in items:
        if item.type is NodeType.REST:
            rest = scope.get(item.value)
            if not is_iterable(rest):
                raise NotIterableError(f"{item.value} is not iterable")
            if isinstance(rest, (list, tuple)):
                result.extend(rest)
        else:
            result.append(evaluate(scope, item))
    return result


# ---------------------------------
# Destructuring
# ---------------------------------
def destruct_array(scope: Scope, items: Sequence[Node], array: Any) -> None:
    """Bind `[a b &rest]` positionally; a trailing rest takes the tail."""
    if not isinstance(array, (list, tuple)):
        if not is_iterable(array):
            raise NotIterableError(f"{array!r} is not iterable")
        array = list(array)
    for i, item in enumerate(items):
        match item.type:
            case NodeType.IDENT:
                scope.set(item.value, array[i] if i < len(array) else Undefined)
            case NodeType.REST:
                scope.set(item.value, list(array[i:]))
                return


def destruct_object(scope: Scope, items: Sequence[Node], obj: Any) -> None:
    """Bind `{a b &rest}` by key; a trailing rest takes the unselected keys."""
    selected: set[str] = set()
    for item in items:
        match item.type:
            case NodeType.IDENT:
                selected.add(item.value)
                scope.set(item.value, get_property(obj, item.value))
            case NodeType.REST:
                rest = {k: v for k, v in own_properties(obj).items() if k not in selected}
                scope.set(item.value, rest)
                return
