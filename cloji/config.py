from __future__ import annotations
import os
import re
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
_DEFAULT_FORBIDDEN_PROPS = ['prototype', 'constructor', '__proto__']
_DEFAULT_LOG_LEVEL = 'WARNING'
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def names_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    """Defaults plus the names listed in ``var`` (path-separator or comma separated)."""
    names = list(defaults)
    raw = os.environ.get(var)
    if not raw:
        return names
    for name in re.split(f'[{re.escape(_sep())},]', raw):
        name = name.strip()
        if name and name not in names:
            names.append(name)
    return names


def get_forbidden_props() -> frozenset[str]:
    return frozenset(names_from_env('CLOJI_FORBIDDEN_PROPS', _DEFAULT_FORBIDDEN_PROPS))


def get_throw_on_error() -> bool:
    raw = os.environ.get('CLOJI_THROW_ON_ERROR')
    if raw is None:
        return True
    return raw.strip().lower() not in _FALSE_VALUES


def get_log_level() -> str:
    return os.environ.get('CLOJI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
