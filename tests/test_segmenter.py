"""Tests for chunk assembly and the public `segment` entry point."""
from __future__ import annotations

import pytest

from phrasecut.segmenter import Segmenter, segment
from phrasecut.types import Model

TEST_SENTENCE = "abcdeabcd"


def test_strong_feature_splits_sentence(toy_model):
    assert segment(toy_model, TEST_SENTENCE) == ["abcde", "abcd"]


def test_separates_even_into_single_character_chunks():
    model = Model.from_dict({"UW4": {"b": 10000}})

    assert segment(model, TEST_SENTENCE) == ["a", "bcdea", "bcd"]


def test_empty_input_yields_no_chunks(toy_model):
    assert segment(toy_model, "") == []
    assert segment(Model(), "") == []


def test_single_character_yields_one_chunk(toy_model):
    assert segment(toy_model, "a") == ["a"]
    assert segment(toy_model, "語") == ["語"]


def test_straddling_bigram_scenario():
    split = Model.from_dict({"BW2": {"AB": 1001}})
    joined = Model.from_dict({"BW2": {"AB": 0}})

    assert segment(split, "AB") == ["A", "B"]
    assert segment(joined, "AB") == ["AB"]


def test_empty_model_never_splits():
    text = "今日は天気です。"

    assert segment(Model(), text) == [text]


@pytest.mark.parametrize(
    "text",
    ["", "a", "ab", TEST_SENTENCE, "aaaaaaa", "今日はいい天気ですね", "😀a😀a😀", "a b\tc\n"],
)
def test_chunks_reconstruct_input_and_are_non_empty(toy_model, text):
    chunks = segment(toy_model, text)

    assert "".join(chunks) == text
    assert all(chunks)
    assert bool(chunks) == bool(text)


def test_segment_is_deterministic(toy_model):
    first = segment(toy_model, TEST_SENTENCE * 3)
    second = segment(toy_model, TEST_SENTENCE * 3)

    assert first == second


def test_boundary_flags_and_positions(toy_model):
    segmenter = Segmenter(toy_model)

    flags = segmenter.boundary_flags(TEST_SENTENCE)

    assert len(flags) == len(TEST_SENTENCE) - 1
    assert [i + 1 for i, f in enumerate(flags) if f] == [5]
    assert segmenter.parse_boundaries(TEST_SENTENCE) == [5]
    assert segmenter.boundary_flags("") == []
    assert segmenter.boundary_flags("a") == []


def test_reversed_input_is_not_mirrored():
    # BW1 reads the two characters before the boundary, so reversing the
    # text does not simply reverse the chunk list.
    model = Model.from_dict({"BW1": {"ab": 5000}})
    text = "abxy"

    forward = segment(model, text)
    backward = segment(model, text[::-1])

    assert forward == ["ab", "xy"]
    assert backward == ["yxba"]
    assert backward != [chunk[::-1] for chunk in reversed(forward)]


def test_segment_many_uses_one_model(toy_model):
    segmenter = Segmenter(toy_model)

    assert segmenter.segment_many(["xa", "", "aa"]) == [["x", "a"], [], ["a", "a"]]
