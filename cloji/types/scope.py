"""Lexical scope for Cloji.

A Scope stores bindings of names to host values and supports nested scopes via
a `parent` link. Names supplied when the scope is created (injected globals,
the core library) are read-only: `def` refuses to rebind them in that scope.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Mapping, Optional

from cloji import HostValue
from cloji.errors import UndefinedVariableError
from cloji.evaluation.object_path import guard_name, object_path_get, object_path_set
from cloji.types.undefined import Undefined


class Scope:
    """Hierarchical mapping from names to host values with read-only tracking."""

    __slots__ = ("vars", "read_only", "parent")

    def __init__(self, vars: Mapping[str, Any] | None = None, parent: Optional[Scope] = None):
        self.vars: dict[str, HostValue] = dict(vars or {})
        self.read_only: frozenset[str] = frozenset(self.vars)
        self.parent: Scope | None = parent

    def is_defined(self, name: str) -> bool:
        """True if `name` is bound here or in any ancestor."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return True
            scope = scope.parent
        return False

    def is_read_only(self, name: str) -> bool:
        return name in self.read_only

    def get_var(self, name: str) -> HostValue:
        """Look up a bare name, walking outward; unbound names are `Undefined`.

        Raises ForbiddenAccessError for denylisted names.
        """
        guard_name(name)
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope.vars[name]
            scope = scope.parent
        return Undefined

    def get(self, name: str) -> HostValue:
        """Resolve a dotted path: the first segment must be bound.

        Raises UndefinedVariableError if it is not.
        """
        var_name, *path = name.split(".")
        guard_name(var_name)
        if not self.is_defined(var_name):
            raise UndefinedVariableError(f"{var_name} is not defined")
        value = self.get_var(var_name)
        if path:
            value = object_path_get(value, path)
        return value

    def set(self, name: str, value: HostValue) -> HostValue:
        """Bind a bare name locally, or write through a dotted path into its base."""
        var_name, *path = name.split(".")
        guard_name(var_name)
        if path:
            object_path_set(self.get_var(var_name), path, value)
        else:
            self.vars[var_name] = value
        return value

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Scope {len(self.vars)} vars ({len(self.read_only)} read-only)>"
