"""Special form: cond, a multi-branch conditional.

(cond (= x 1) "eq" (> x 1) "gt" :else "default")

The arguments are evaluated once, structurally, as an array of alternating
conditions and results (spreads allowed). Unlike `if`, every condition and
result is evaluated. Keys are self-evaluating nodes and therefore truthy, so
`:else` in condition position acts as the default branch.
"""

from cloji import HostValue
from cloji.evaluation.evaluator import struct_array
from cloji.types.node import Node
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined


def cond_form(scope: Scope, *clauses: Node) -> HostValue:
    values = struct_array(scope, clauses)
    for i in range(0, len(values), 2):
        result = values[i + 1] if i + 1 < len(values) else Undefined
        if values[i]:
            return result
    return Undefined
