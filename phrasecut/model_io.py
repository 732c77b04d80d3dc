"""Loading and saving of BudouX-format model artifacts.

A model artifact is a JSON object whose keys are feature group identifiers
(`UW1`..`UW6`, `BW1`..`BW3`, `TW1`..`TW4`) and whose values map feature strings
to integer weights. Models are loaded once, validated at load time, and handed
to the segmenter as immutable `Model` instances; any problem with an artifact
is reported here rather than during segmentation.
"""
from __future__ import annotations
import json
from dataclasses import replace
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .types import THRESHOLD, Model

PathLike = Union[str, Path]

SUPPORTED_LANGUAGES = ("ja", "zh-hans", "zh-hant", "th")
BIAS_MODES = ("derived", "artifact", "zero")
BIAS_KEY = "BIAS"
# Trained artifacts published with the budoux distribution.
BUNDLED_MODELS_PACKAGE = "budoux"


def _half_rounded_up(total: int) -> int:
    # (total + 1) / 2 with integer division truncating toward zero.
    n = total + 1
    q = abs(n) // 2
    return q if n >= 0 else -q


def derive_bias(model: Model) -> int:
    """
    Computes the bias that reproduces BudouX's own decision rule.

    BudouX parsers start every position at `-((S + 1) / 2)`, where `S` is the
    sum of all weights in the model, and accept a boundary when the score is
    positive. Shifting that base score by the fixed threshold gives the same
    decisions under the `total > THRESHOLD` rule, except near the text edges:
    BudouX clamps windows there while `extract_features` omits them.

    Args:
        model: The model whose weights are summed. Its own bias is ignored.

    Returns:
        The bias to store on the `Model`.
    """
    return THRESHOLD - _half_rounded_up(model.total_weight())


def _parse_groups(data: Dict[str, Any]) -> Dict[str, Dict[str, int]]:
    groups: Dict[str, Dict[str, int]] = {}
    for name, table in data.items():
        if not isinstance(table, dict):
            continue
        # Only integer weights are meaningful; bools are ints in Python but not weights.
        groups[name] = {
            str(feature): weight
            for feature, weight in table.items()
            if isinstance(weight, int) and not isinstance(weight, bool)
        }
    return groups


def model_from_json_data(data: Any, bias_mode: str = "derived", source: str = "<data>") -> Model:
    """
    Builds a `Model` from decoded JSON data.

    Args:
        data: The decoded JSON document.
        bias_mode: How to pick the model's bias: "derived" reproduces
                   BudouX's base score, "artifact" reads a top-level integer
                   "BIAS" entry (0 when absent), "zero" uses no bias.
        source: A label used in error messages.

    Returns:
        The constructed `Model`.

    Raises:
        TypeError: If the document root is not an object, or the "BIAS"
                   entry is not an integer.
        ValueError: If `bias_mode` is not recognised.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object of feature groups in {source}")
    if bias_mode not in BIAS_MODES:
        raise ValueError(f"Unknown bias mode '{bias_mode}'; expected one of {', '.join(BIAS_MODES)}")

    model = Model(groups=_parse_groups(data))

    if bias_mode == "derived":
        bias = derive_bias(model)
    elif bias_mode == "artifact":
        raw_bias = data.get(BIAS_KEY, 0)
        if not isinstance(raw_bias, int) or isinstance(raw_bias, bool):
            raise TypeError(f"'{BIAS_KEY}' in {source} must be an integer, got {raw_bias!r}")
        bias = raw_bias
    else:
        bias = 0

    return replace(model, bias=bias)


def load_model(path: PathLike, bias_mode: str = "derived") -> Model:
    """
    Loads a model artifact from a JSON file.

    Non-object groups and non-integer weights are skipped, so artifacts with
    extra metadata still load.

    Args:
        path: The path to the JSON artifact.
        bias_mode: See `model_from_json_data`.

    Returns:
        The loaded `Model`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON, or `bias_mode` is unknown.
        TypeError: If the JSON root is not an object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Model file not found at: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from {path}: {e}")

    return model_from_json_data(data, bias_mode=bias_mode, source=str(path))


def save_model(path: PathLike, model: Model, include_bias: bool = False) -> None:
    """
    Writes a model's group tables to a JSON file.

    Args:
        path: The destination path.
        model: The model to save.
        include_bias: Also write the bias as a top-level "BIAS" entry, so the
                      file can be reloaded with `bias_mode="artifact"`.
    """
    data: Dict[str, Any] = model.to_dict()
    if include_bias:
        data[BIAS_KEY] = model.bias

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def bundled_models_dir() -> Path:
    """Returns the directory of trained artifacts shipped by the budoux package."""
    return Path(str(resources.files(BUNDLED_MODELS_PACKAGE).joinpath("models")))


def model_path_for(language: str, models_dir: Optional[PathLike] = None) -> Path:
    """
    Resolves the artifact path for a supported language.

    Raises:
        ValueError: If the language is not supported.
    """
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language '{language}'; expected one of {', '.join(SUPPORTED_LANGUAGES)}"
        )
    base = Path(models_dir) if models_dir is not None else bundled_models_dir()
    return base / f"{language}.json"


def load_language_model(
    language: str,
    models_dir: Optional[PathLike] = None,
    bias_mode: str = "derived",
) -> Model:
    """
    Loads the model for a supported language.

    Args:
        language: One of `SUPPORTED_LANGUAGES`.
        models_dir: Directory holding `<language>.json` artifacts. Defaults to
                    the trained models shipped with budoux.
        bias_mode: See `model_from_json_data`.

    Returns:
        The loaded `Model`.

    Raises:
        ValueError: If the language is not supported.
        FileNotFoundError: If no artifact exists for the language.
    """
    return load_model(model_path_for(language, models_dir), bias_mode=bias_mode)
