"""Syntax tree nodes produced by the reader and consumed by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    ROOT = "root"
    SEXPR = "sexpression"
    STRING = "string"
    NUMBER = "number"
    KEY = "key"
    IDENT = "identifier"
    KEYWORD = "keyword"
    ARRAY = "array"
    OBJECT = "object"
    REST = "rest"
    JS = "js"


COMPOSITE_TYPES = frozenset({NodeType.ROOT, NodeType.SEXPR, NodeType.ARRAY, NodeType.OBJECT})


@dataclass(frozen=True)
class Node:
    """Immutable tree unit.

    ``value`` is a token string for leaves, a tuple of child Nodes for
    composites, and the raw host value for ``JS`` nodes.
    """

    type: NodeType
    value: Any
    line: int = 0

    @classmethod
    def wrap(cls, value: Any, line: int = 0) -> Node:
        """Wrap a host value so it can flow back through evaluation."""
        return cls(NodeType.JS, value, line)

    @property
    def is_composite(self) -> bool:
        return self.type in COMPOSITE_TYPES

    def __repr__(self) -> str:
        if self.is_composite:
            inner = " ".join(repr(child) for child in self.value)
            return f"<{self.type.value}@{self.line} {inner}>"
        return f"{self.type.value}({self.value!r})@{self.line}"
