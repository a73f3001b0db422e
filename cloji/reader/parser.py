"""
  Cloji Reader: tokenizer and tree builder in a single forward pass.

- Emits immutable Node trees instead of Python primitives:

    - (head arg ...)   -> Node(SEXPR, (...))
    - [item ...]       -> Node(ARRAY, (...))
    - {:key value ...} -> Node(OBJECT, (...))
    - "text"           -> Node(STRING, unescaped text)
    - true false nil void -> Node(KEYWORD, text)
    - :name            -> Node(KEY, "name")
    - 12, 1.5e3, 0xff  -> Node(NUMBER, raw text)
    - &name            -> Node(REST, "name")
    - anything else in the identifier charset -> Node(IDENT, text)
    - ;; to end of line -> skipped

Every node carries the line its token (or opening bracket) starts on. Bracket
nesting is validated with an explicit stack, so a stray or mismatched closer and
an opener left open at end of input are both reported with their lines.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from cloji.errors import ClojiSyntaxError, UnbalancedBracketError
from cloji.types.node import Node, NodeType

logger = logging.getLogger(__name__)

IDENT_CHARS = r"[\w.+\-*/=<>\"'$#?]"

WHITESPACE_RE = re.compile(r"\s+")
COMMENT_RE = re.compile(r";;[^\n]*")
STRING_RE = re.compile(r'"(?:[^\\"]|\\[\s\S])*"')
KEYWORD_RE = re.compile(rf"(?:true|false|nil|void)(?!{IDENT_CHARS})")
KEY_RE = re.compile(r":\w+")
NUMBER_RE = re.compile(r"0x[\da-fA-F]+|\d*\.?\d+(?:[eE][+-]?\d+)?")
REST_RE = re.compile(rf"&{IDENT_CHARS}+")
IDENT_RE = re.compile(rf"{IDENT_CHARS}+")
ESCAPE_RE = re.compile(r"\\([\s\S])")

OPENERS: dict[str, NodeType] = {
    "(": NodeType.SEXPR,
    "[": NodeType.ARRAY,
    "{": NodeType.OBJECT,
}
CLOSERS: dict[str, str] = {")": "(", "]": "[", "}": "{"}
CLOSER_NAMES: dict[str, str] = {")": "parenthesis", "]": "bracket", "}": "brace"}
NAMED_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", "r": "\r"}


def unescape(text: str) -> str:
    return ESCAPE_RE.sub(lambda m: NAMED_ESCAPES.get(m.group(1), m.group(1)), text)


class Reader:
    """Cursor over the source text plus the stack of currently open brackets."""

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.start_line = 1
        self.current_line = 1
        self.stack: list[tuple[str, int]] = []

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def match(self, pattern: re.Pattern[str]) -> Optional[str]:
        """Consume `pattern` at the cursor and return the text, or None."""
        m = pattern.match(self.source, self.position)
        if not m:
            return None
        text = m.group(0)
        self.start_line = self.current_line
        self.position = m.end()
        self.current_line += text.count("\n")
        return text

    def match_char(self, chars: str) -> Optional[str]:
        """Consume a single bracket character from `chars`."""
        if self.at_end() or self.source[self.position] not in chars:
            return None
        char = self.source[self.position]
        self.start_line = self.current_line
        self.position += 1
        return char

    def skip_whitespace(self) -> None:
        self.match(WHITESPACE_RE)

    def leaf(self, node_type: NodeType, value: str) -> Node:
        return Node(node_type, value, self.start_line)

    def read_composite(self, node_type: NodeType, line: int) -> Node:
        """Read children until the matching closer (or end of input)."""
        children: list[Node] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            if self.match(COMMENT_RE) is not None:
                continue
            closer = self.match_char(")]}")
            if closer is not None:
                opener = self.stack.pop()[0] if self.stack else None
                if opener != CLOSERS[closer]:
                    raise UnbalancedBracketError(
                        f"Unexpected closing {CLOSER_NAMES[closer]} '{closer}' at line {self.current_line}"
                    )
                break
            children.append(self.read_token())
        return Node(node_type, tuple(children), line)

    def read_token(self) -> Node:
        opener = self.match_char("([{")
        if opener is not None:
            line = self.start_line
            self.stack.append((opener, line))
            return self.read_composite(OPENERS[opener], line)

        if (text := self.match(STRING_RE)) is not None:
            return self.leaf(NodeType.STRING, unescape(text[1:-1]))
        if (text := self.match(KEYWORD_RE)) is not None:
            return self.leaf(NodeType.KEYWORD, text)
        if (text := self.match(KEY_RE)) is not None:
            return self.leaf(NodeType.KEY, text[1:])
        if (text := self.match(NUMBER_RE)) is not None:
            return self.leaf(NodeType.NUMBER, text)
        if (text := self.match(REST_RE)) is not None:
            return self.leaf(NodeType.REST, text[1:])
        if (text := self.match(IDENT_RE)) is not None:
            return self.leaf(NodeType.IDENT, text)

        char = self.source[self.position]
        raise ClojiSyntaxError(
            f"Unrecognized token at line {self.current_line}, position {self.position}: "
            f"{char!r}, code {ord(char)}"
        )

    def read_program(self) -> Node:
        root = self.read_composite(NodeType.ROOT, 0)
        if self.stack:
            opener, line = self.stack[0]
            raise UnbalancedBracketError(
                f"Unmatched opening bracket '{opener}' from line {line} "
                f"(input ended at line {self.current_line})"
            )
        return Node(NodeType.ROOT, root.value, self.current_line)


def parse(source: str) -> Node:
    """Parse `source` into a ROOT node whose children are the top-level forms."""
    root = Reader(source).read_program()
    logger.debug("Parsed %d top-level form(s) over %d line(s)", len(root.value), root.line)
    return root
