from cloji import HostValue
from cloji.errors import ClojiArityError
from cloji.evaluation.evaluator import evaluate
from cloji.types.node import Node
from cloji.types.scope import Scope


def if_form(
    scope: Scope,
    cond: Node | None = None,
    then: Node | None = None,
    otherwise: Node | None = None,
) -> HostValue:
    """
    (if cond "ok" "notok")
    Only the taken branch is evaluated; a missing else branch yields Undefined.
    """
    if cond is None:
        raise ClojiArityError("if requires a condition")
    if evaluate(scope, cond):
        return evaluate(scope, then)
    return evaluate(scope, otherwise)
