from cloji import HostValue
from cloji.evaluation.evaluator import eval_list
from cloji.types.node import Node
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined


def comment_form(scope: Scope, *_: Node) -> HostValue:
    """(## anything) is ignored and yields Undefined."""
    return Undefined


def print_form(scope: Scope, *args: Node) -> HostValue:
    """Print space-separated values of args followed by newline; returns Undefined."""
    print(*eval_list(scope, args))
    return Undefined
