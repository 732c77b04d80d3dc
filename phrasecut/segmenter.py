"""Chunk segmentation over an input string.

Segmentation runs in two phases. First every interior position is scored on
its own, producing one boolean per position; no position depends on another,
so this phase could be split up freely. Then a single left-to-right pass turns
the accepted positions into chunks. The result depends only on the text and
the model.
"""
from __future__ import annotations
from typing import Iterable, List

from .scorer import Scorer
from .types import THRESHOLD, Model


def _compute_boundary_flags(text: str, scorer: Scorer) -> List[bool]:
    """Scores positions 1..N-1; index i of the result refers to position i + 1."""
    return [scorer.score(text, position) for position in range(1, len(text))]


def _assemble_chunks(text: str, boundaries: Iterable[int]) -> List[str]:
    chunks: List[str] = []
    start = 0
    for boundary in boundaries:
        chunks.append(text[start:boundary])
        start = boundary
    chunks.append(text[start:])
    return chunks


class Segmenter:
    """
    Splits text into chunks using a single model.

    A segmenter is bound to one model for its lifetime. It keeps no per-call
    state, so one instance can serve any number of texts, including from
    several threads at once.

    Attributes:
        model: The per-language weight table.
        scorer: The `Scorer` used to evaluate each candidate position.
    """
    def __init__(self, model: Model, threshold: int = THRESHOLD):
        self.model = model
        self.scorer = Scorer(model, threshold=threshold)

    def boundary_flags(self, text: str) -> List[bool]:
        """
        Evaluates every interior position independently.

        Args:
            text: The input text.

        Returns:
            A list of length `max(len(text) - 1, 0)`; entry `i` is True when a
            boundary is accepted between `text[i]` and `text[i + 1]`.
        """
        return _compute_boundary_flags(text, self.scorer)

    def parse_boundaries(self, text: str) -> List[int]:
        """Returns the accepted boundary positions in increasing order."""
        flags = self.boundary_flags(text)
        return [i + 1 for i, accepted in enumerate(flags) if accepted]

    def segment(self, text: str) -> List[str]:
        """
        Splits `text` into an ordered list of chunks.

        Args:
            text: The input text. It is scored exactly as given; no
                  normalization or trimming is applied.

        Returns:
            An empty list for empty input, otherwise a non-empty list of
            non-empty chunks whose concatenation equals `text`.
        """
        if not text:
            return []
        if len(text) < 2:
            return [text]
        return _assemble_chunks(text, self.parse_boundaries(text))

    def segment_many(self, texts: Iterable[str]) -> List[List[str]]:
        """Segments each text in turn."""
        return [self.segment(text) for text in texts]


def segment(model: Model, text: str) -> List[str]:
    """
    Splits `text` into chunks using `model`.

    This is the main entry point. It is a pure function of its arguments:
    calling it twice with the same model and text yields the same chunks.

    Args:
        model: The per-language weight table.
        text: The text to split.

    Returns:
        The ordered list of chunks.
    """
    return Segmenter(model).segment(text)
