import pytest

from phrasebreak.evaluate import boundaries_from_chunks, compare_boundaries, evaluate_parser
from phrasebreak.parser import Parser
from phrasebreak.types import Model


def test_boundaries_from_chunks():
    assert boundaries_from_chunks(["今日は", "天気", "です。"]) == {3, 5}
    assert boundaries_from_chunks(["abc"]) == set()
    assert boundaries_from_chunks([]) == set()


def test_compare_boundaries_counts_hits_and_misses():
    generated = [["今日は", "天気です。"], ["ab", "c", "d"]]
    reference = [["今日は", "天気", "です。"], ["a", "bc", "d"]]

    report = compare_boundaries(generated, reference)
    scores = report["scores"]

    # tp = {3} + {3}, fp = {2}, fn = {5} + {1}
    assert scores["precision"] == pytest.approx(2 / 3)
    assert scores["recall"] == pytest.approx(2 / 4)
    assert scores["f1"] == pytest.approx(2 * (2 / 3) * 0.5 / (2 / 3 + 0.5))
    assert scores["sentence_accuracy"] == 0.0
    assert [(d["sentence"], d["offset"]) for d in report["disagreements"]] == [(0, 5), (1, 1), (1, 2)]
    assert report["disagreements"][0]["context"] == "は天気|です。"


def test_compare_boundaries_perfect_match():
    reference = [["今日は", "天気です。"]]

    report = compare_boundaries(reference, reference)

    assert report["scores"]["f1"] == pytest.approx(1.0)
    assert report["scores"]["sentence_accuracy"] == 1.0
    assert report["disagreements"] == []


def test_compare_boundaries_rejects_mismatched_inputs():
    with pytest.raises(ValueError):
        compare_boundaries([["a"]], [])
    with pytest.raises(ValueError):
        compare_boundaries([["ab"]], [["a", "c"]])


def test_evaluate_parser_with_zero_weight_model():
    report = evaluate_parser(Parser(Model.empty()), [["今日は", "天気です。"], ["a"]])

    assert report["scores"]["precision"] == 0.0
    assert report["scores"]["recall"] == 0.0
    assert report["scores"]["sentence_accuracy"] == 0.5
