from cloji.types.node import Node, NodeType
from cloji.types.undefined import Undefined

__all__ = ["Node", "NodeType", "Undefined"]
