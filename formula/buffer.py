# formula/buffer.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Mutable token buffer the caller assembles a formula in

"""Formula buffer holding the token sequence under construction.

The buffer only stores tokens. It never parses or validates the sequence
shape; malformed formulas are legal to hold and are rejected by the engine
when evaluated.
"""

from typing import Iterator, Tuple

from .tokens import render_tokens
from utils.logger import get_logger


class FormulaBuffer:
    """Ordered, append-only-at-the-end sequence of formula tokens.

    Mutation is limited to appending one token, removing the last token and
    clearing. Readers get immutable snapshots via tokens().
    """

    DISPLAY_SEPARATOR = " "

    def __init__(self, tokens=()):
        self._tokens: list[str] = []
        for token in tokens:
            self.append(token)

    def append(self, token: str) -> None:
        """Add a token at the end of the formula.

        Raises:
            ValueError: token is not a non-empty string
        """
        if not isinstance(token, str) or not token:
            raise ValueError(f"Formula tokens must be non-empty strings, got {token!r}")
        self._tokens.append(token)
        get_logger().debug(f"Buffer append '{token}' → {self.render_display()}")

    def remove_last(self) -> None:
        """Drop the final token; does nothing on an empty buffer."""
        if self._tokens:
            removed = self._tokens.pop()
            get_logger().debug(f"Buffer removed '{removed}'")

    def clear(self) -> None:
        self._tokens.clear()

    def tokens(self) -> Tuple[str, ...]:
        """Snapshot of the current token sequence."""
        return tuple(self._tokens)

    def is_empty(self) -> bool:
        return not self._tokens

    def render_display(self) -> str:
        """Render the formula with operator glyphs, tokens separated by a space."""
        return render_tokens(self._tokens, self.DISPLAY_SEPARATOR)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __repr__(self) -> str:
        return f"FormulaBuffer({list(self._tokens)!r})"
