"""Language-defined function values.

Call sites treat two kinds of callables differently:

- LanguageFunction (SpecialForm, Closure) receives the live Scope plus the raw,
  unevaluated argument Nodes, so it decides what gets evaluated and when.
- Anything else that is callable is a host function and receives evaluated
  values only.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable

from cloji import HostValue
from cloji.types.node import Node, NodeType
from cloji.types.scope import Scope


class LanguageFunction:
    """Marker base for callables that take `(scope, *nodes)`."""

    __slots__ = ()

    def invoke(self, scope: Scope, *nodes: Node) -> HostValue:
        raise NotImplementedError


class SpecialForm(LanguageFunction):
    """A core-library form implemented by a Python function of `(scope, *nodes)`."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., HostValue]):
        self.name = name
        self.fn = fn

    def invoke(self, scope: Scope, *nodes: Node) -> HostValue:
        return self.fn(scope, *nodes)

    def __call__(self, *args: HostValue) -> HostValue:
        """Host calling convention: plain values are wrapped as Js nodes in an empty scope."""
        return self.invoke(Scope(), *(Node.wrap(arg) for arg in args))

    def __repr__(self) -> str:
        return f"<special form {self.name}>"


class Closure(LanguageFunction):
    """A first-class `fn` with a parameter pattern, a body and its declaration scope."""

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: Node, body: tuple[Node, ...], scope: Scope):
        self.params: Node = params
        self.body: tuple[Node, ...] = body
        self.scope: Scope = scope

    def invoke(self, scope: Scope, *nodes: Node) -> HostValue:
        """Evaluate `nodes` in the caller's scope, then run the body lexically.

        The body runs in a fresh child of the declaration scope, never of the
        caller's scope.
        """
        from cloji.evaluation.evaluator import destruct_array, execute_block, struct_array

        args = struct_array(scope, nodes)
        fn_scope = Scope(parent=self.scope)
        destruct_array(fn_scope, self.params.value, args)
        return execute_block(fn_scope, self.body)

    def __call__(self, *args: HostValue) -> HostValue:
        """Host calling convention: plain values are wrapped as Js nodes."""
        return self.invoke(self.scope, *(Node.wrap(arg) for arg in args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn [")
            buffer.write(" ".join(
                ("&" if p.type is NodeType.REST else "") + str(p.value) for p in self.params.value
            ))
            buffer.write("] ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


def is_language_function(value: object) -> bool:
    return isinstance(value, LanguageFunction)


def is_callable(value: object) -> bool:
    return isinstance(value, LanguageFunction) or callable(value)
