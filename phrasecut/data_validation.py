from __future__ import annotations
from typing import Any, Dict, Iterator, List, Sequence, Tuple

from .features import window_width
from .types import FEATURE_GROUPS, Model


def iter_chunk_spans(chunks: Sequence[str]) -> Iterator[Tuple[int, int]]:
    """
    Yields the code-point span covered by each chunk.

    Args:
        chunks: The ordered chunks returned by the segmenter.

    Yields:
        A tuple `(start, end)` for each chunk, with `end` exclusive.
    """
    start = 0
    for chunk in chunks:
        end = start + len(chunk)
        yield (start, end)
        start = end


def validate_model(model: Model) -> Dict[str, Any]:
    """
    Performs sanity checks on a loaded model.

    The checks catch artifacts that would load fine but could never match
    anything during segmentation:
    -   Groups whose name is not one of the thirteen feature groups.
    -   Empty feature strings.
    -   Feature strings whose length differs from the group's window width.

    Args:
        model: The model to check.

    Returns:
        A dictionary with the total `issue_count` and a list of `issues`,
        each a dictionary describing one problem.
    """
    issues: List[Dict[str, Any]] = []

    for group, table in model.groups.items():
        if group not in FEATURE_GROUPS:
            issues.append({
                "type": "unknown_group_warning",
                "group": group,
                "message": f"Group '{group}' is not a recognised feature group and will never be probed."
            })
            continue

        width = window_width(group)
        for feature in table:
            if not feature:
                issues.append({
                    "type": "empty_feature_error",
                    "group": group,
                    "message": f"Group '{group}' contains an empty feature string."
                })
            elif len(feature) != width:
                issues.append({
                    "type": "feature_width_error",
                    "group": group,
                    "feature": feature,
                    "message": f"Feature {feature!r} in group '{group}' has {len(feature)} characters (expected {width}); it is never probed, including at text edges where BudouX would match a clipped window."
                })

    return {"issue_count": len(issues), "issues": issues}


def validate_chunks(text: str, chunks: Sequence[str]) -> Dict[str, Any]:
    """
    Checks that a chunk list is a faithful partition of `text`.

    Args:
        text: The original input.
        chunks: The chunks produced for it.

    Returns:
        A dictionary with the total `issue_count` and a list of `issues`.
    """
    issues: List[Dict[str, Any]] = []

    for idx, (start, end) in enumerate(iter_chunk_spans(chunks)):
        if start == end:
            issues.append({
                "type": "empty_chunk_error",
                "idx": idx,
                "message": f"Chunk {idx} at offset {start} is empty."
            })

    joined = "".join(chunks)
    if joined != text:
        issues.append({
            "type": "reconstruction_error",
            "message": f"Chunks join to {len(joined)} characters that do not match the {len(text)}-character input."
        })

    return {"issue_count": len(issues), "issues": issues}
