"""Special forms: thread and doto.

Both evaluate an initial value and pass it through a chain of steps.

- thread calls a *method of the running value* at each step:
    (thread [3 4 5] (filter (fn [x] (< x 5))) (map (fn [x] (+ x 3))))  ; => [6 7]
- doto calls a *scope function* with the running value spliced in as the first
  argument:
    (doto [3 4 5] (tail) (head))  ; => 4

A step is either an s-expression `(name args...)` or a bare `name`.
"""

from cloji import HostValue
from cloji.errors import ClojiArityError, InvalidSyntaxError, NotCallableError, push_frame
from cloji.evaluation.evaluator import evaluate, struct_array
from cloji.evaluation.object_path import get_property
from cloji.types.function import is_callable, is_language_function
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope


def step_parts(step: Node) -> tuple[Node, tuple[Node, ...]]:
    if step.type is NodeType.SEXPR and step.value and step.value[0].type is NodeType.IDENT:
        return step.value[0], step.value[1:]
    if step.type is NodeType.IDENT:
        return step, ()
    raise InvalidSyntaxError(f"Invalid chain step {step.type.value} at line {step.line}")


def thread_form(scope: Scope, initial: Node | None = None, *steps: Node) -> HostValue:
    if initial is None:
        raise ClojiArityError("thread requires an initial value")
    result = evaluate(scope, initial)
    for step in steps:
        method_name, args = step_parts(step)
        member = get_property(result, method_name.value)
        if not is_callable(member):
            raise push_frame(NotCallableError(f"{method_name.value} is not a function"), method_name)
        if is_language_function(member):
            result = member.invoke(scope, *args)
        else:
            result = member(*struct_array(scope, args))
    return result


def doto_form(scope: Scope, initial: Node | None = None, *steps: Node) -> HostValue:
    if initial is None:
        raise ClojiArityError("doto requires an initial value")
    result = evaluate(scope, initial)
    for step in steps:
        fn_name, args = step_parts(step)
        if not is_callable(scope.get(fn_name.value)):
            raise push_frame(NotCallableError(f"{fn_name.value} is not a function"), fn_name)
        # A fresh call node; the parsed tree stays untouched.
        call = Node(NodeType.SEXPR, (fn_name, Node.wrap(result, step.line), *args), step.line)
        result = evaluate(scope, call)
    return result
