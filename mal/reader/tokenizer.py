"""
  Tokenizer for the mal reader.

Splits source text into (token_type, token_value) tuples:

    - tilde_at                -> "~@"
    - lparen / rparen         -> "(" / ")"
    - lbracket / rbracket     -> "[" / "]"
    - lbrace / rbrace         -> "{" / "}"
    - string                  -> '"..."' kept verbatim, quotes included
    - comment                 -> ";..." up to end of line (dropped by the parser)
    - atom                    -> everything else; the reader-sugar characters
                                 ' ` ~ ^ @ are one-character atoms

Whitespace and commas separate tokens and are never emitted.
"""

from __future__ import annotations

import re
from typing import Iterator

from mal.types.errors import MalQuoteError


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"(?P<tilde_at>~@)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbracket>\[)"
    r"|(?P<rbracket>\])"
    r"|(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # closing quote optional so we can report it
    r"|(?P<comment>;[^\n]*)"
    r"|(?P<atom>['`~^@]|[^\s\[\]{}('\"`,;)]+)"
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    for match in TOKEN_RE.finditer(source):
        tok_type = next(nm for nm in TOKEN_RE.groupindex if match.group(nm) is not None)
        tok_val = match.group(tok_type)
        if tok_type == "string" and (len(tok_val) < 2 or not tok_val.endswith('"')):
            raise MalQuoteError(f"unterminated quote starting at {tok_val}")
        yield tok_type, tok_val


def tokenize(source: str) -> list[tuple[str, str]]:
    """Scan all of `source` up front so string errors surface before parsing."""
    return list(lex(source))
