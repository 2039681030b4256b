"""
  mal reader: recursive-descent parser over the token stream.

- One token of lookahead (peek / advance)
- Emits mal values directly:

    - nil           -> Nil
    - true / false  -> True / False
    - integers      -> int (signed 64-bit; anything wider reads as a symbol)
    - :name         -> Keyword
    - "..."         -> str, quotes kept verbatim
    - (...)         -> List
    - [...]         -> Array
    - {...}         -> Map (flat key/value run)
    - 'x `x ~x @x   -> (quote x) (quasiquote x) (unquote x) (deref x)
    - ~@x           -> (splice-unquote x)
    - ^m x          -> (with-meta x m)
    - other atoms   -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from mal import SExpression
from mal.types.errors import (
    MalNoMoreTokens,
    MalQuoteError,
    MalReaderError,
    MalUnbalancedArray,
    MalUnbalancedList,
    MalUnbalancedMap,
)
from mal.types.keyword import Keyword
from mal.types.nil import Nil
from mal.types.reader_macro import ReaderMacro
from mal.types.sequence import Array, List, Map, Sequence
from mal.types.symbol import Symbol

INT_RE = re.compile(r"[+-]?[0-9]+\Z")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Atoms that wrap the following form as (marker form)
QUOTE_FORMS: dict[str, ReaderMacro] = {
    "'": ReaderMacro.QUOTE,
    "`": ReaderMacro.QUASIQUOTE,
    "~": ReaderMacro.UNQUOTE,
    "@": ReaderMacro.DEREF,
}

# open token -> (close token, sequence type, error raised when unbalanced)
SEQUENCES: dict[str, tuple[str, type[Sequence], type[MalReaderError]]] = {
    "lparen": ("rparen", List, MalUnbalancedList),
    "lbracket": ("rbracket", Array, MalUnbalancedArray),
    "lbrace": ("rbrace", Map, MalUnbalancedMap),
}

STRAY_CLOSERS: dict[str, tuple[str, type[MalReaderError]]] = {
    "rparen": (")", MalUnbalancedList),
    "rbracket": ("]", MalUnbalancedArray),
    "rbrace": ("}", MalUnbalancedMap),
}


def parse_int64(text: str) -> Optional[int]:
    """Return the integer `text` spells, or None if it is not a signed 64-bit integer."""
    if not INT_RE.match(text):
        return None
    value = int(text)
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def validate_string(content: str) -> str:
    """Check escaping of a string token and return it unchanged.

    A trailing backslash escapes nothing, and a token whose final quote is
    escaped was never closed; both are quote errors.
    """
    missing_escape = False
    last_quote_escaped = False
    for ch in content:
        if missing_escape:
            last_quote_escaped = ch == '"'
            missing_escape = False
        else:
            missing_escape = ch == "\\"
            last_quote_escaped = False
    if missing_escape or last_quote_escaped:
        raise MalQuoteError(f"unterminated quote starting at {content}")
    return content


class TokenStream:
    def __init__(self, tokens: Iterable[tuple[str, str]]):
        self.tokens: list[tuple[str, str]] = list(tokens)
        self.pos = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.pos >= len(self.tokens):
            return None, None
        return self.tokens[self.pos]

    def advance(self) -> tuple[str, str]:
        if self.pos >= len(self.tokens):
            raise MalNoMoreTokens()
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def skip_comments(self) -> None:
        while self.peek()[0] == "comment":
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_comments()
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        self.skip_comments()
        tok_type, tok_val = self.advance()

        if tok_type == "atom":
            return self.parse_atom(tok_val)

        if tok_type == "string":
            return validate_string(tok_val)

        if tok_type in SEQUENCES:
            close, seq_type, error = SEQUENCES[tok_type]
            return self.parse_sequence(close, seq_type, error)

        if tok_type in STRAY_CLOSERS:
            char, error = STRAY_CLOSERS[tok_type]
            raise error(f"Unexpected '{char}' without a matching opener")

        if tok_type == "tilde_at":
            return self.parse_wrapped(ReaderMacro.SPLICE_UNQUOTE)

        raise MalReaderError(f"Unknown token: {tok_type} {tok_val}")

    def parse_sequence(
        self,
        close: str,
        seq_type: type[Sequence],
        error: type[MalReaderError],
    ) -> Sequence:
        items: list[SExpression] = []
        while True:
            self.skip_comments()
            tok_type, _ = self.peek()
            if tok_type is None:
                raise error()
            if tok_type == close:
                self.advance()
                return seq_type(items)
            items.append(self.parse_expr())

    def parse_wrapped(self, marker: ReaderMacro) -> List:
        return List.of(marker, self.parse_expr())

    def parse_atom(self, tok_val: str) -> SExpression:
        if tok_val == "nil":
            return Nil

        number = parse_int64(tok_val)
        if number is not None:
            return number

        if tok_val == "true":
            return True
        if tok_val == "false":
            return False

        if tok_val.startswith(":"):
            return Keyword(tok_val)

        if tok_val in QUOTE_FORMS:
            return self.parse_wrapped(QUOTE_FORMS[tok_val])

        if tok_val == "^":
            meta = self.parse_expr()
            target = self.parse_expr()
            return List.of(ReaderMacro.WITH_META, target, meta)

        return Symbol(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()
