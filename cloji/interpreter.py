from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from cloji import HostValue
from cloji.builtin.core import get_core_scope
from cloji.config import get_throw_on_error
from cloji.errors import attach_trace
from cloji.evaluation.evaluator import execute_block
from cloji.reader.parser import parse
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Outcome of running a script: the last value or the recorded error."""

    scope: Scope
    value: HostValue = Undefined
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        if self.error is None:
            return None
        return attach_trace(self.error)

    def get(self, name: str) -> HostValue:
        """Read a (dotted) variable from the script scope."""
        return self.scope.get(name)

    def get_var(self, name: str) -> HostValue:
        return self.scope.get_var(name)


class Script:
    """
    Runs Cloji source against a scope of read-only host globals.
    The scope persists across `exec` calls, so later sources see earlier defs.
    """

    def __init__(self, scope: Scope, throw_on_error: bool = True):
        self.scope = scope
        self.throw_on_error = throw_on_error

    def exec(self, source: str) -> ExecutionResult:
        """Parse and evaluate `source`.

        Syntax errors always raise. Runtime errors get their trace rendered into
        the message, then either propagate or are recorded on the result.
        """
        program = parse(source)
        logger.debug("Executing %d form(s)", len(program.value))
        try:
            value = execute_block(self.scope, program.value)
        except Exception as err:
            message = attach_trace(err)
            if self.throw_on_error:
                raise
            logger.warning("Script failed: %s", message)
            return ExecutionResult(self.scope, Undefined, err)
        return ExecutionResult(self.scope, value)


def script(globals: Mapping[str, Any] | None = None, throw_on_error: bool | None = None) -> Script:
    """Create a Script whose scope holds `globals` and inherits the core library."""
    if throw_on_error is None:
        throw_on_error = get_throw_on_error()
    return Script(Scope(globals or {}, get_core_scope()), throw_on_error)


def execute(source: str, globals: Mapping[str, Any] | None = None, throw_on_error: bool | None = None) -> ExecutionResult:
    return script(globals, throw_on_error).exec(source)
