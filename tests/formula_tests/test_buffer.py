# tests/formula_tests/test_buffer.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Test suite for the formula buffer

"""Test suite for FormulaBuffer mutation and display rendering."""

import pytest
from formula import FormulaBuffer
from utils.logger import get_logger


class TestFormulaBuffer:
    """Append / remove-last / clear semantics and snapshots."""

    def setup_method(self):
        self.buffer = FormulaBuffer()
        self.logger = get_logger()

    def test_new_buffer_is_empty(self):
        assert self.buffer.is_empty()
        assert len(self.buffer) == 0
        assert self.buffer.tokens() == ()
        assert self.buffer.render_display() == ""

    def test_append_keeps_order(self):
        for token in ["P", "&&", "Q"]:
            self.buffer.append(token)

        assert self.buffer.tokens() == ("P", "&&", "Q")
        assert list(self.buffer) == ["P", "&&", "Q"]

    def test_malformed_sequences_are_stored(self):
        """The buffer never validates formula shape."""
        for token in [")", "&&", "&&", "("]:
            self.buffer.append(token)

        assert len(self.buffer) == 4

    def test_remove_last(self):
        self.buffer.append("P")
        self.buffer.append("||")
        self.buffer.remove_last()

        assert self.buffer.tokens() == ("P",)

    def test_remove_last_on_empty_buffer_is_a_noop(self):
        self.buffer.remove_last()
        assert self.buffer.is_empty()

    def test_clear(self):
        buffer = FormulaBuffer(["P", "xor", "Q"])
        buffer.clear()

        assert buffer.is_empty()
        assert buffer.render_display() == ""

    @pytest.mark.parametrize("bad_token", ["", None, 3])
    def test_append_rejects_non_tokens(self, bad_token):
        with pytest.raises(ValueError):
            self.buffer.append(bad_token)

    def test_snapshot_is_detached_from_later_edits(self):
        self.buffer.append("P")
        snapshot = self.buffer.tokens()
        self.buffer.append("&&")

        assert snapshot == ("P",)


class TestFormulaDisplay:
    """Human-readable rendering substitutes operator glyphs."""

    DISPLAY_CASES = [
        (["P", "&&", "Q"], "P ∧ Q"),
        (["P", "||", "Q"], "P ∨ Q"),
        (["!", "P"], "¬ P"),
        (["P", "xor", "Q"], "P ⊕ Q"),
        (["P", "<->", "Q"], "P ↔ Q"),
        (["P", "->", "Q"], "P → Q"),
        (["(", "P", "&&", "Q", ")", "||", "R"], "( P ∧ Q ) ∨ R"),
    ]

    @pytest.mark.parametrize("tokens, expected", DISPLAY_CASES)
    def test_render_display(self, tokens, expected):
        assert FormulaBuffer(tokens).render_display() == expected

    def test_display_tracks_edits(self):
        buffer = FormulaBuffer(["P", "&&"])
        buffer.append("Q")
        assert buffer.render_display() == "P ∧ Q"

        buffer.remove_last()
        assert buffer.render_display() == "P ∧"
