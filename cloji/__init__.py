# Core type aliases for Cloji's data model.
# Scripts manipulate plain host values (dict, list, str, int/float, bool, None and
# arbitrary Python objects). Code is represented by immutable Node trees.
#
# Naming guidance:
# - Node:       parser/evaluator code dealing with syntax (see cloji.types.node).
# - HostValue:  evaluator/runtime code dealing with evaluated values.

from typing import Any

HostValue = Any

from cloji.interpreter import ExecutionResult, Script, execute, script  # noqa: E402

__all__ = ["HostValue", "ExecutionResult", "Script", "execute", "script"]
