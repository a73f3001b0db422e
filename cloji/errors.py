"""Error taxonomy and diagnostic traces for Cloji.

Runtime errors pick up one ``(identifier, line)`` frame per enclosing
s-expression while they unwind; the script entry point renders those frames
into the error message as a pseudo call stack.
"""

from __future__ import annotations

from cloji.types.node import Node

TRACE_ATTR = "cloji_trace"


class ClojiError(Exception):
    """ Base class for all Cloji errors"""
    pass


class ClojiSyntaxError(ClojiError):
    """ Raised when the source contains a token the parser does not recognise"""


class UnbalancedBracketError(ClojiSyntaxError):
    """ Raised when brackets are mismatched or left open"""


class UndefinedVariableError(ClojiError):
    """ Raised when a name is not bound in any enclosing scope"""


class ForbiddenAccessError(ClojiError):
    """ Raised when a script touches a denylisted property name"""


class ReadOnlyRebindError(ClojiError):
    """ Raised when def targets a read-only name of the current scope"""


class NotCallableError(ClojiError):
    """ Raised when a call head, thread method or doto step is not a function"""


class NotIterableError(ClojiError):
    """ Raised when a spread or destructuring source cannot be iterated"""


class InvalidSyntaxError(ClojiError):
    """ Raised when the evaluator receives a node it cannot evaluate"""


class ClojiArityError(ClojiError):
    """ Raised when a special form is missing a required operand"""


def node_ident(node: Node) -> str | None:
    """First identifier-like token of ``node``, searched depth first."""
    value = node.value
    if isinstance(value, str):
        return value
    if isinstance(value, tuple):
        for child in value:
            if isinstance(child, Node):
                name = node_ident(child)
                if name:
                    return name
    return None


def get_trace(err: BaseException) -> list[tuple[str | None, int]]:
    return getattr(err, TRACE_ATTR, [])


def push_frame(err: BaseException, node: Node | None) -> BaseException:
    """Append a diagnostic frame for ``node`` to ``err`` and return ``err``."""
    trace = getattr(err, TRACE_ATTR, None)
    if trace is None:
        trace = []
        setattr(err, TRACE_ATTR, trace)
    if node is not None:
        trace.append((node_ident(node), node.line))
    return err


def format_trace(err: BaseException) -> str:
    """Render ``err`` and its frames, innermost first."""
    message = str(err.args[0]) if err.args else type(err).__name__
    frames = get_trace(err)
    if not frames:
        return message
    lines = "\n at ".join(f"{ident} ({line})" for ident, line in frames)
    return f"{message} \n at {lines} \n\n -----"


def attach_trace(err: BaseException) -> str:
    """Rewrite the message of ``err`` to carry its trace; idempotent."""
    if getattr(err, "cloji_formatted", False):
        return str(err.args[0])
    message = format_trace(err)
    if get_trace(err):
        err.args = (message, *err.args[1:])
        err.cloji_formatted = True
    return message
