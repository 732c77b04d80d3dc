"""Boundary scoring against a per-language model."""
from __future__ import annotations

from .features import extract_features
from .types import THRESHOLD, Model


class Scorer:
    """
    Decides whether a candidate position is a chunk boundary.

    The score of a position is the model's bias plus the weight of every
    feature extracted at that position. A boundary is accepted when that total
    strictly exceeds the threshold. All arithmetic is on integers, and the
    scorer holds no state beyond the model it was built with, so `score` may be
    called for any position in any order.

    Attributes:
        model: The read-only weight table.
        threshold: The cutoff a total must exceed to accept a boundary.
    """
    def __init__(self, model: Model, threshold: int = THRESHOLD):
        self.model = model
        self.threshold = threshold

    def total(self, text: str, position: int) -> int:
        """Returns the accumulated score for the boundary at `position`."""
        score = self.model.bias
        for group, feature in extract_features(text, position):
            score += self.model.weight(group, feature)
        return score

    def score(self, text: str, position: int) -> bool:
        """Returns True if the boundary at `position` is accepted."""
        return self.total(text, position) > self.threshold
