# tests/formula_tests/test_tokens.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Test suite for operator vocabulary and token classification

"""Test suite for the formula token vocabulary.

Covers exact-string operator classification, variable recognition and the
operator → display glyph mapping.
"""

import pytest
from formula.tokens import (
    Operator,
    OPERATOR_SYMBOLS,
    display_symbol,
    is_operator,
    is_variable,
    operator_for,
    render_tokens,
)


class TestTokenClassification:
    """Operator/variable classification by exact string membership."""

    OPERATOR_CASES = [
        ("!", Operator.NOT),
        ("&&", Operator.AND),
        ("||", Operator.OR),
        ("xor", Operator.XOR),
        ("->", Operator.IMPLIES),
        ("<->", Operator.IFF),
        ("(", Operator.LEFT_PAREN),
        (")", Operator.RIGHT_PAREN),
    ]

    @pytest.mark.parametrize("token, expected", OPERATOR_CASES)
    def test_operator_tokens_resolve(self, token, expected):
        assert operator_for(token) is expected
        assert is_operator(token)
        assert not is_variable(token)

    def test_operator_symbol_set_is_exactly_the_vocabulary(self):
        assert OPERATOR_SYMBOLS == {"!", "&&", "||", "xor", "->", "<->", "(", ")"}

    VARIABLE_CASES = ["P", "q", "A1", "XOR", "and", "&", "|", "not", "x or"]

    @pytest.mark.parametrize("token", VARIABLE_CASES)
    def test_anything_else_is_a_variable(self, token):
        assert operator_for(token) is None
        assert not is_operator(token)
        assert is_variable(token)

    def test_empty_string_is_not_a_variable(self):
        assert not is_variable("")


class TestDisplayGlyphs:
    """Operator tokens render with their canonical glyphs."""

    GLYPH_CASES = [
        ("&&", "∧"),
        ("||", "∨"),
        ("!", "¬"),
        ("xor", "⊕"),
        ("<->", "↔"),
        ("->", "→"),
        ("(", "("),
        (")", ")"),
        ("P", "P"),
        ("rain", "rain"),
    ]

    @pytest.mark.parametrize("token, glyph", GLYPH_CASES)
    def test_display_symbol(self, token, glyph):
        assert display_symbol(token) == glyph

    def test_render_tokens_joins_with_single_space(self):
        assert render_tokens(["!", "(", "P", "->", "Q", ")"]) == "¬ ( P → Q )"

    def test_render_tokens_custom_separator(self):
        assert render_tokens(["P", "<->", "Q"], separator="") == "P↔Q"
