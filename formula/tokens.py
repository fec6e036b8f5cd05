# formula/tokens.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Operator vocabulary and display glyphs for formula tokens

"""Token vocabulary for propositional formulas.

A formula is an ordered sequence of string tokens. A token is either one of
the fixed operator symbols below or a variable name (any other non-empty
string). The classification is purely by exact string membership.

Operators:
    !    NOT          ¬
    &&   AND          ∧
    ||   OR           ∨
    xor  XOR          ⊕
    ->   IMPLIES      →
    <->  IFF          ↔
    (    LEFT_PAREN   (
    )    RIGHT_PAREN  )
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class Operator(Enum):
    """Operator tokens, each carrying its input symbol and display glyph."""

    NOT = ("!", "¬")
    AND = ("&&", "∧")
    OR = ("||", "∨")
    XOR = ("xor", "⊕")
    IMPLIES = ("->", "→")
    IFF = ("<->", "↔")
    LEFT_PAREN = ("(", "(")
    RIGHT_PAREN = (")", ")")

    def __init__(self, symbol: str, glyph: str):
        self.symbol = symbol
        self.glyph = glyph

    def __str__(self) -> str:
        return self.symbol


_BY_SYMBOL = {op.symbol: op for op in Operator}

OPERATOR_SYMBOLS: frozenset[str] = frozenset(_BY_SYMBOL)


def operator_for(token: str) -> Optional[Operator]:
    """Return the operator a token stands for, or None for variable names."""
    return _BY_SYMBOL.get(token)


def is_operator(token: str) -> bool:
    return token in _BY_SYMBOL


def is_variable(token: str) -> bool:
    """A variable is any non-empty token that is not an operator symbol."""
    return bool(token) and token not in _BY_SYMBOL


def display_symbol(token: str) -> str:
    """Map a token to its human-facing glyph; variables pass through unchanged.

    Args:
        token: Raw formula token

    Returns:
        Display glyph for operators, the token itself otherwise
    """
    op = _BY_SYMBOL.get(token)
    return op.glyph if op is not None else token


def render_tokens(tokens, separator: str = " ") -> str:
    """Join tokens for display, substituting operator glyphs."""
    return separator.join(display_symbol(t) for t in tokens)
