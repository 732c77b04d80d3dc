"""
phrasecut: split unsegmented text into line-breakable chunks.

Basic usage:
    from phrasecut import Model, segment

    model = Model.from_dict({"BW2": {"AB": 1001}})
    segment(model, "AB")  # ["A", "B"]
"""
from .model_io import load_language_model, load_model, save_model
from .scorer import Scorer
from .segmenter import Segmenter, segment
from .types import FEATURE_GROUPS, THRESHOLD, Model

__version__ = "0.1.0"

__all__ = [
    "Model",
    "Scorer",
    "Segmenter",
    "segment",
    "load_model",
    "load_language_model",
    "save_model",
    "FEATURE_GROUPS",
    "THRESHOLD",
    "__version__",
]
