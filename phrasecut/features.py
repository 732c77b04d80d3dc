"""Feature extraction for a single candidate boundary."""
from __future__ import annotations
from typing import List

from .types import FEATURE_GROUPS, FEATURE_WINDOWS, Feature


def extract_features(text: str, position: int) -> List[Feature]:
    """
    Builds the group-qualified feature keys to probe at a boundary position.

    Each of the thirteen feature groups reads a fixed window of characters
    around `position` (the boundary between `text[position - 1]` and
    `text[position]`). Python strings index by code point, so a window never
    splits a character. A group whose window reaches past either end of the
    text is left out for this position.

    Args:
        text: The full input text.
        position: The boundary index, normally in `1..len(text) - 1`.

    Returns:
        A list of `(group, feature)` pairs in group order.
    """
    n = len(text)
    features: List[Feature] = []
    for group in FEATURE_GROUPS:
        start, end = FEATURE_WINDOWS[group]
        lo, hi = position + start, position + end
        if lo < 0 or hi > n:
            continue
        features.append((group, text[lo:hi]))
    return features


def window_width(group: str) -> int:
    """Returns the number of characters a group's feature string spans."""
    start, end = FEATURE_WINDOWS[group]
    return end - start
