from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from phrasebreak.types import FEATURE_NAMES, Model


def test_feature_names_cover_all_thirteen_tables() -> None:
    assert len(FEATURE_NAMES) == 13
    assert FEATURE_NAMES[:6] == ("UW1", "UW2", "UW3", "UW4", "UW5", "UW6")
    assert FEATURE_NAMES[6:9] == ("BW1", "BW2", "BW3")
    assert FEATURE_NAMES[9:] == ("TW1", "TW2", "TW3", "TW4")


def test_empty_model_has_zero_total_weight() -> None:
    model = Model.empty()

    assert model.total_weight() == 0
    assert all(len(model.table(name)) == 0 for name in FEATURE_NAMES)


def test_model_without_arguments_has_independent_read_only_tables() -> None:
    first = Model()
    second = Model()

    assert first == second == Model.empty()
    assert all(isinstance(first.table(name), MappingProxyType) for name in FEATURE_NAMES)
    with pytest.raises(TypeError):
        first.UW1["a"] = 1  # type: ignore[index]
    assert first.UW1 is not second.UW1


def test_model_copies_a_mapping_proxy_argument() -> None:
    source = {"a": 1}
    model = Model(BW2=MappingProxyType(source))

    source["b"] = 2

    assert dict(model.BW2) == {"a": 1}


def test_total_weight_sums_every_table() -> None:
    model = Model(UW1={"a": 3, "b": -1}, BW2={"ab": 10}, TW4={"abc": -4})

    assert model.total_weight() == 8


def test_model_is_read_only() -> None:
    source = {"a": 1}
    model = Model(UW1=source)

    with pytest.raises(FrozenInstanceError):
        model.UW1 = {}  # type: ignore[misc]
    with pytest.raises(TypeError):
        model.UW1["b"] = 2  # type: ignore[index]

    # Later changes to the source dict do not leak into the model
    source["c"] = 5
    assert "c" not in model.UW1


def test_table_rejects_unknown_name() -> None:
    with pytest.raises(KeyError):
        Model.empty().table("QW1")
