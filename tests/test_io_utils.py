import json
from pathlib import Path

import pytest

from conftest import make_model
from phrasebreak.io_utils import (
    ModelLoadError,
    load_default_model,
    load_model,
    model_from_dict,
    save_model,
)
from phrasebreak.types import FEATURE_NAMES, Model


def _full_tables(**overrides) -> dict:
    data = {name: {} for name in FEATURE_NAMES}
    data.update(overrides)
    return data


def test_model_from_dict_accepts_thirteen_tables() -> None:
    model = model_from_dict(_full_tables(UW1={"あ": 12}, TW4={"abc": -3}))

    assert model.UW1["あ"] == 12
    assert model.TW4["abc"] == -3
    assert model.total_weight() == 9


def test_model_from_dict_ignores_unknown_top_level_keys() -> None:
    model = model_from_dict(_full_tables(version={"x": 1}))

    assert model == Model.empty()


def test_model_from_dict_reports_missing_tables() -> None:
    data = _full_tables()
    del data["BW3"]
    del data["TW1"]

    with pytest.raises(ModelLoadError, match="BW3, TW1"):
        model_from_dict(data)


@pytest.mark.parametrize("bad", [[], "UW1", None, 3])
def test_model_from_dict_rejects_non_object_root(bad) -> None:
    with pytest.raises(ModelLoadError):
        model_from_dict(bad)


@pytest.mark.parametrize("value", [1.5, "3", True, None, [1]])
def test_model_from_dict_rejects_non_integer_weights(value) -> None:
    with pytest.raises(ModelLoadError, match="non-integer"):
        model_from_dict(_full_tables(UW2={"a": value}))


def test_model_from_dict_rejects_non_object_table() -> None:
    with pytest.raises(ModelLoadError, match="UW5"):
        model_from_dict(_full_tables(UW5=[1, 2]))


def test_load_model_reads_json_file(toy_model_path: Path, toy_model: Model) -> None:
    assert load_model(toy_model_path) == toy_model


def test_load_model_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ModelLoadError, match="could not read"):
        load_model(tmp_path / "missing.json")


def test_load_model_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ModelLoadError, match="decoding JSON") as excinfo:
        load_model(path)

    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_save_model_writes_canonical_tables(tmp_path: Path) -> None:
    path = tmp_path / "out.json"
    save_model(path, make_model(BW2={"天気": 42}))

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)

    assert list(data) == list(FEATURE_NAMES)
    assert data["BW2"] == {"天気": 42}
    assert "天気" in text


def test_load_default_model_is_cached() -> None:
    first = load_default_model("ja")

    assert load_default_model("ja") is first
    assert first.total_weight() != 0


def test_load_default_model_unknown_language() -> None:
    with pytest.raises(ModelLoadError, match="no bundled model"):
        load_default_model("xx")


def test_error_message_mentions_model_loading() -> None:
    err = ModelLoadError("boom")

    assert str(err) == "Failed to load model: boom"
    assert err.reason == "boom"
