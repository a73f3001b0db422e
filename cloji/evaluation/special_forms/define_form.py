from cloji import HostValue
from cloji.errors import ClojiArityError, InvalidSyntaxError, ReadOnlyRebindError
from cloji.evaluation.evaluator import destruct_array, destruct_object, evaluate
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined

NAME_TYPES = (NodeType.IDENT, NodeType.STRING, NodeType.KEY)


def check_rebind(scope: Scope, target: Node) -> None:
    if target.type is NodeType.IDENT and scope.is_read_only(target.value):
        raise ReadOnlyRebindError(f"Trying to set readonly variable '{target.value}'")


def def_form(scope: Scope, target: Node | None = None, value: Node | None = None) -> HostValue:
    """
    (def a 1)
    (def [a b] [2 3])
    Like set, but refuses to rebind a read-only name of the current scope.
    """
    if target is None:
        raise ClojiArityError("def requires a name or pattern and a value")
    check_rebind(scope, target)
    return set_form(scope, target, value)


def set_form(scope: Scope, target: Node | None = None, value: Node | None = None) -> HostValue:
    """
    (set a 2)
    (set a.name "Peter")
    (set {name &rest} obj)
    Destructuring patterns bind each name and return Undefined.
    """
    if target is None:
        raise ClojiArityError("set requires a name or pattern and a value")
    evaluated = evaluate(scope, value)
    if target.type is NodeType.ARRAY:
        destruct_array(scope, target.value, evaluated)
        return Undefined
    if target.type is NodeType.OBJECT:
        destruct_object(scope, target.value, evaluated)
        return Undefined
    if target.type not in NAME_TYPES:
        raise InvalidSyntaxError(f"Cannot assign to {target.type.value} at line {target.line}")
    return scope.set(target.value, evaluated)
