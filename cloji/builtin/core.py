"""The Cloji core library: special forms plus operators, installed as the root scope."""
from __future__ import annotations

from typing import Optional

from cloji.builtin.operators import OPERATORS
from cloji.evaluation.special_forms import SPECIAL_FORMS
from cloji.types.scope import Scope

_core_scope: Optional[Scope] = None


def create_core_scope() -> Scope:
    """A fresh root scope holding the fixed form/operator table as read-only names."""
    return Scope({**SPECIAL_FORMS, **OPERATORS})


def get_core_scope() -> Scope:
    """Process-wide core scope shared by every script."""
    global _core_scope
    if _core_scope is None:
        _core_scope = create_core_scope()
    return _core_scope
