"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()

from phrasecut.types import Model  # noqa: E402


@pytest.fixture
def toy_model() -> Model:
    """A model where only a strong UW4 feature on 'a' is defined."""
    return Model.from_dict({"UW4": {"a": 10000}})
