"""Special forms for working with host objects: new, aget, aset.

Path segments given as keys (`:name`) are read as plain strings; strings,
numbers and identifiers are evaluated as usual.
"""

from typing import Sequence

from cloji import HostValue
from cloji.errors import ClojiArityError, NotCallableError, node_ident
from cloji.evaluation.evaluator import eval_list, evaluate, struct_array
from cloji.evaluation.object_path import object_path_get, object_path_set
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope


def keys_to_strings(nodes: Sequence[Node]) -> list[Node]:
    return [
        Node(NodeType.STRING, node.value, node.line) if node.type is NodeType.KEY else node
        for node in nodes
    ]


def new_form(scope: Scope, cls: Node | None = None, *args: Node) -> HostValue:
    """(new date 2024 1 31)"""
    if cls is None:
        raise ClojiArityError("new requires a constructor")
    constructor = evaluate(scope, cls)
    if not callable(constructor):
        raise NotCallableError(f"{node_ident(cls)} is not a constructor")
    return constructor(*struct_array(scope, args))


def aget_form(scope: Scope, obj: Node | None = None, *path: Node) -> HostValue:
    """(aget obj :pets 0 key)"""
    if obj is None:
        raise ClojiArityError("aget requires an object")
    return object_path_get(evaluate(scope, obj), eval_list(scope, keys_to_strings(path)))


def aset_form(scope: Scope, obj: Node | None = None, *rest: Node) -> HostValue:
    """(aset obj :pets 0 "dog") writes the path and returns obj."""
    if obj is None or len(rest) < 2:
        raise ClojiArityError("aset requires an object, a path and a value")
    *path, value = rest
    target = evaluate(scope, obj)
    evaluated = evaluate(scope, value)
    object_path_set(target, eval_list(scope, keys_to_strings(path)), evaluated)
    return target
