from typing import Callable

from cloji import HostValue
from cloji.errors import ClojiArityError, InvalidSyntaxError, NotCallableError
from cloji.evaluation.evaluator import evaluate
from cloji.evaluation.special_forms.define_form import check_rebind
from cloji.types.function import Closure, is_language_function
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined


def fn_form(scope: Scope, params: Node | None = None, *body: Node) -> Closure:
    """
    (fn [a b] body...)
    (fn [head &tail] body...)
    The closure captures the declaration scope. With no body forms, invoking it
    yields Undefined.
    """
    if params is None:
        raise ClojiArityError("fn requires at least a parameter list")
    if params.type is not NodeType.ARRAY:
        raise InvalidSyntaxError(
            f"fn expects a parameter array, got {params.type.value} at line {params.line}"
        )
    return Closure(params, body, scope)


def defn_form(scope: Scope, name: Node | None = None, params: Node | None = None, *body: Node) -> Closure:
    """(defn name [a] body...) is (def name (fn [a] body...))."""
    if name is None:
        raise ClojiArityError("defn requires a name and a parameter list")
    if name.type is not NodeType.IDENT:
        raise InvalidSyntaxError(f"defn expects a name, got {name.type.value} at line {name.line}")
    check_rebind(scope, name)
    return scope.set(name.value, fn_form(scope, params, *body))


def jsfn_form(scope: Scope, target: Node | None = None, *body: Node) -> Callable[..., HostValue]:
    """
    (jsfn f)
    (jsfn [x] expr)
    Adapt a language function into a plain Python callable for host APIs.
    """
    if target is None:
        return Undefined
    if target.type is NodeType.ARRAY:
        func = fn_form(scope, target, *body)
    else:
        func = evaluate(scope, target)
        if not is_language_function(func):
            raise NotCallableError(f"jsfn expects a language function, got {type(func).__name__}")

    def adapter(*args: HostValue) -> HostValue:
        return func.invoke(scope, *(Node.wrap(arg) for arg in args))

    return adapter
