#!/usr/bin/env python3
"""
Parser for documentation viewer navigation scripts.

The viewer ships its table of contents as a JavaScript file made of plain
``var NAME = <literal>;`` statements (``navtreedata.js``). This module reads
those statements back into Python values without evaluating any JavaScript:
arrays become lists, strings become str, ``null`` becomes None.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional


class NavTreeSyntaxError(ValueError):
    """Raised when a navigation script cannot be tokenized or parsed."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass
class Token:
    """A lexical token with the line it starts on."""
    kind: str  # 'string', 'number', 'name', 'punct'
    value: str
    line_number: int


_TOKEN_PATTERN = re.compile(
    r"""
      (?P<ws>\s+)
    | (?P<comment>/\*.*?\*/|//[^\n]*)
    | (?P<string>"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')
    | (?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    | (?P<name>[A-Za-z_$][\w$]*)
    | (?P<punct>[\[\],=;])
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_PATTERN = re.compile(r"\\(u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",  # line continuation
}

_DECLARATION_KEYWORDS = {"var", "let", "const"}

_LITERAL_NAMES = {"null": None, "true": True, "false": False}

# Deepest array nesting accepted; a NAVTREE entry uses two levels per tree level.
MAX_ARRAY_NESTING = 200


def unescape_string(raw: str) -> str:
    """Decode a quoted JavaScript string literal (quotes included)."""
    def _replace(match: re.Match) -> str:
        escape = match.group(1)
        if escape[0] in "ux" and len(escape) > 1:
            return chr(int(escape[1:], 16))
        return _SIMPLE_ESCAPES.get(escape, escape)

    return _ESCAPE_PATTERN.sub(_replace, raw[1:-1])


class NavTreeScriptParser:
    """
    Reads the variable assignments of a navigation script.

    Only the literal subset the documentation generator emits is supported:
    nested arrays, strings, numbers, ``null``, ``true`` and ``false``.
    """

    def parse(self, content: str) -> Dict[str, object]:
        """Parse script content and return a mapping of variable name to value."""
        self._tokens = self.tokenize(content)
        self._pos = 0
        variables: Dict[str, object] = {}

        while not self._at_end():
            keyword = self._expect("name")
            if keyword.value not in _DECLARATION_KEYWORDS:
                raise NavTreeSyntaxError(
                    f"Expected variable declaration, found '{keyword.value}'",
                    keyword.line_number,
                )
            name = self._expect("name")
            self._expect("punct", "=")
            variables[name.value] = self._parse_literal()
            self._expect("punct", ";")

        return variables

    def tokenize(self, content: str) -> List[Token]:
        """Split script content into tokens, dropping whitespace and comments."""
        tokens = []
        pos = 0
        line_number = 1

        while pos < len(content):
            match = _TOKEN_PATTERN.match(content, pos)
            if not match:
                raise NavTreeSyntaxError(
                    f"Unexpected character {content[pos]!r}", line_number
                )
            kind = match.lastgroup
            text = match.group()
            if kind not in ("ws", "comment"):
                tokens.append(Token(kind, text, line_number))
            line_number += text.count("\n")
            pos = match.end()

        return tokens

    # ------------------------------------------------------------------
    # Recursive descent over the token list
    # ------------------------------------------------------------------

    def _parse_literal(self, depth: int = 0) -> object:
        token = self._next()
        if token.kind == "string":
            return unescape_string(token.value)
        if token.kind == "number":
            if any(ch in token.value for ch in ".eE"):
                return float(token.value)
            return int(token.value)
        if token.kind == "name" and token.value in _LITERAL_NAMES:
            return _LITERAL_NAMES[token.value]
        if token.kind == "punct" and token.value == "[":
            return self._parse_array(depth + 1, token.line_number)
        raise NavTreeSyntaxError(
            f"Unexpected token '{token.value}'", token.line_number
        )

    def _parse_array(self, depth: int, line_number: int) -> list:
        if depth > MAX_ARRAY_NESTING:
            raise NavTreeSyntaxError(
                f"Nesting too deep (more than {MAX_ARRAY_NESTING} arrays)", line_number
            )
        items = []
        while True:
            token = self._peek()
            if token is None:
                raise NavTreeSyntaxError("Unterminated array", self._last_line())
            if token.kind == "punct" and token.value == "]":
                self._pos += 1
                return items
            items.append(self._parse_literal(depth))

            separator = self._next()
            if separator.kind == "punct" and separator.value == "]":
                return items
            if not (separator.kind == "punct" and separator.value == ","):
                raise NavTreeSyntaxError(
                    f"Expected ',' or ']', found '{separator.value}'",
                    separator.line_number,
                )

    def _expect(self, kind: str, value: Optional[str] = None) -> Token:
        token = self._next()
        if token.kind != kind or (value is not None and token.value != value):
            expected = value if value is not None else kind
            raise NavTreeSyntaxError(
                f"Expected '{expected}', found '{token.value}'", token.line_number
            )
        return token

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise NavTreeSyntaxError("Unexpected end of script", self._last_line())
        self._pos += 1
        return token

    def _peek(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _last_line(self) -> int:
        return self._tokens[-1].line_number if self._tokens else 1


def parse_navtree_script(content: str) -> Dict[str, object]:
    """Parse a navigation script with a fresh parser."""
    return NavTreeScriptParser().parse(content)
