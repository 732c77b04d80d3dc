"""Manages the loading and validation of segmenter configuration.

This module defines the `Config` dataclass, which collects the settings that
pick a model for the command line tool and library helpers: which language to
use, where its artifact lives, and how its bias is chosen. The `load_config`
function reads these settings from a YAML file and resolves any relative model
paths against the directory that file lives in.
"""
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from .model_io import BIAS_MODES, SUPPORTED_LANGUAGES, load_language_model, load_model
from .types import Model


@dataclass
class Config:
    """
    A typed configuration object for model selection and output formatting.

    Attributes:
        language: The default language code (one of "ja", "zh-hans",
                  "zh-hant", "th").
        bias_mode: How the model's bias is chosen on load ("derived",
                   "artifact" or "zero").
        models_dir: Directory holding `<language>.json` artifacts. `None`
                    falls back to the models shipped with budoux.
        models: Per-language artifact paths that take precedence over
                `models_dir`.
        delimiter: The separator placed between chunks when printing.
    """
    language: str = "ja"
    bias_mode: str = "derived"
    models_dir: Optional[str] = None
    models: Dict[str, str] = field(default_factory=dict)
    delimiter: str = "\n"

    def load_model(self, language: Optional[str] = None) -> Model:
        """
        Loads the model for `language`, or for the configured default language.

        Raises:
            ValueError: If the language is not supported.
            FileNotFoundError: If the artifact is missing.
        """
        lang = language or self.language
        override = self.models.get(lang)
        if override:
            return load_model(override, bias_mode=self.bias_mode)
        return load_language_model(lang, models_dir=self.models_dir, bias_mode=self.bias_mode)


def load_config(path: str = "phrasecut.yaml", required: bool = True) -> Config:
    """
    Loads and validates a YAML configuration file into a `Config` object.

    Relative `models_dir` and `models` paths are resolved against the directory
    containing the configuration file.

    Args:
        path: The path to the YAML file.
        required: When False, a missing file yields the default `Config`
                  instead of an error.

    Returns:
        A fully populated `Config`.

    Raises:
        FileNotFoundError: If the file is required and cannot be found.
        ValueError: If the YAML cannot be parsed or holds an unsupported
                    language or bias mode.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        if not required:
            print(f"[CONFIG] No {Path(path).name} found. Using default settings.", file=sys.stderr)
            return Config()
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    base_dir = Path(path).parent

    language = str(y.get("language", "ja"))
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}' in {path}.")

    bias_mode = str(y.get("bias_mode", "derived"))
    if bias_mode not in BIAS_MODES:
        raise ValueError(f"Unknown bias_mode '{bias_mode}' in {path}.")

    models_dir = y.get("models_dir")
    if models_dir is not None:
        models_dir = str(base_dir / str(models_dir))

    models_yaml = y.get("models", {}) or {}
    if not isinstance(models_yaml, dict):
        raise TypeError(f"'models' in {path} must map language codes to paths.")
    models = {str(lang): str(base_dir / str(p)) for lang, p in models_yaml.items()}

    return Config(
        language=language,
        bias_mode=bias_mode,
        models_dir=models_dir,
        models=models,
        delimiter=str(y.get("delimiter", "\n")),
    )
