"""Core data types shared by the feature extractor, scorer and segmenter.

The model format follows the BudouX convention: thirteen named feature groups,
each mapping a feature string (the characters drawn from a fixed window around
a candidate boundary) to a signed integer weight.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

__all__ = [
    "THRESHOLD",
    "UNIGRAM_GROUPS",
    "BIGRAM_GROUPS",
    "TRIGRAM_GROUPS",
    "FEATURE_GROUPS",
    "FEATURE_WINDOWS",
    "Feature",
    "Model",
]

# A candidate boundary is accepted when its total score strictly exceeds this.
THRESHOLD = 1000

UNIGRAM_GROUPS = ("UW1", "UW2", "UW3", "UW4", "UW5", "UW6")
BIGRAM_GROUPS = ("BW1", "BW2", "BW3")
TRIGRAM_GROUPS = ("TW1", "TW2", "TW3", "TW4")
FEATURE_GROUPS = UNIGRAM_GROUPS + BIGRAM_GROUPS + TRIGRAM_GROUPS

# Half-open character windows relative to a boundary position p: the feature
# string for a group is text[p + start : p + end]. Offset -1 is text[p - 1],
# offset +1 is text[p].
FEATURE_WINDOWS: Dict[str, Tuple[int, int]] = {
    "UW1": (-3, -2),
    "UW2": (-2, -1),
    "UW3": (-1, 0),
    "UW4": (0, 1),
    "UW5": (1, 2),
    "UW6": (2, 3),
    "BW1": (-2, 0),
    "BW2": (-1, 1),
    "BW3": (0, 2),
    "TW1": (-3, 0),
    "TW2": (-2, 1),
    "TW3": (-1, 2),
    "TW4": (0, 3),
}

Feature = Tuple[str, str]


def _freeze(groups: Mapping[str, Mapping[str, int]]) -> Mapping[str, Mapping[str, int]]:
    return MappingProxyType(
        {str(name): MappingProxyType(dict(weights)) for name, weights in groups.items()}
    )


@dataclass(frozen=True, eq=False)
class Model:
    """
    A read-only per-language weight table.

    Instances are built once by a loader (see `phrasecut.model_io`) or directly
    from a dictionary, and are then shared by any number of segmenters. The
    group tables are copied and wrapped in read-only proxies on construction,
    so later changes to the source dictionary do not leak into the model.

    Attributes:
        groups: Mapping of group name (e.g. "UW4", "BW2") to a mapping of
                feature string to integer weight.
        bias: The baseline score every candidate boundary starts from.
    """
    groups: Mapping[str, Mapping[str, int]] = field(default_factory=dict)
    bias: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", _freeze(self.groups))
        object.__setattr__(self, "bias", int(self.bias))

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, int]], bias: int = 0) -> "Model":
        """Builds a model from a plain `{group: {feature: weight}}` dictionary."""
        return cls(groups=data, bias=bias)

    def weight(self, group: str, feature: str) -> int:
        """
        Looks up a single feature weight.

        Absence is the common case, so a missing group or feature simply
        contributes nothing.

        Args:
            group: The feature group identifier (e.g. "TW3").
            feature: The feature string drawn from the text.

        Returns:
            The stored weight, or 0 if the group or feature is not present.
        """
        table = self.groups.get(group)
        if table is None:
            return 0
        return table.get(feature, 0)

    def total_weight(self) -> int:
        """Returns the sum of every weight across all groups."""
        return sum(sum(table.values()) for table in self.groups.values())

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Returns a mutable deep copy of the group tables."""
        return {name: dict(table) for name, table in self.groups.items()}
