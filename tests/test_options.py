"""Tests for the options store."""

import tempfile
from pathlib import Path

import pytest
import yaml

from cocoda_utils.options import DEFAULT_OPTIONS, Options, OptionsError, get_path, load_options


def test_default_languages():
    options = Options()
    assert isinstance(options.get("languages"), list)
    assert options.get("languages") == ["en", "de"]


def test_defaults_not_shared():
    a = Options()
    b = Options()
    a.get("delay")["short"] = 1
    assert b.get("delay")["short"] == 250
    assert DEFAULT_OPTIONS["delay"]["short"] == 250


def test_set_and_get():
    options = Options()
    value = {"nested": [1, 2, {"x": None}]}
    options.set("x", value)
    assert options.get("x") is value
    options.set("languages", ["de", "en", "fr"])
    assert options.get("languages") == ["de", "en", "fr"]


def test_unset_option():
    assert Options().get("missing") is None
    assert "missing" not in Options()


def test_live_languages_from_store():
    store = {"state": {"settings": {"languages": ["fr"]}}}
    options = Options(store=store, languages_path="state.settings.languages")
    assert options.languages == ["fr"]
    store["state"]["settings"]["languages"] = ["de", "en"]
    assert options.languages == ["de", "en"]
    store["state"]["settings"]["languages"] = []
    assert options.languages == ["en", "de"]


def test_get_path():
    data = {"creator": [{"uri": "u1", "name": None}], "a": {"b": 0}}
    assert get_path(data, "creator.0.uri") == "u1"
    assert get_path(data, "creator.1.uri") is None
    assert get_path(data, "creator.x") is None
    assert get_path(data, "creator.0.name", "") == ""
    assert get_path(data, "a.b") == 0
    assert get_path(None, "a", "d") == "d"
    assert get_path("text", "a.b") is None


def test_load_options():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "options.yaml"
        with open(path, "w") as f:
            yaml.dump({"cocoda_utils": {"languages": ["de"], "delay": {"short": 100}}}, f)

        options = load_options(path)
        assert options.languages == ["de"]
        assert options.get("delay") == {"short": 100}
        assert options.get("license_badges")


def test_load_options_top_level():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "options.yaml"
        path.write_text("languages: [fr, en]\n")
        assert load_options(path).languages == ["fr", "en"]


def test_load_options_errors():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(OptionsError):
            load_options(Path(tmpdir) / "missing.yaml")

        path = Path(tmpdir) / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(OptionsError):
            load_options(path)

        path = Path(tmpdir) / "broken.yaml"
        path.write_text("languages: [en\n")
        with pytest.raises(ValueError):
            load_options(path)


def test_set_get_identity():
    options = Options()
    for value in (None, [], "", ["de"], {"a": 1}):
        options.set("languages", value)
        assert options.get("languages") is value


def test_languages_normalized():
    options = Options({"languages": "de"})
    assert options.get("languages") == "de"
    assert options.languages == ["de"]
    options.set("languages", None)
    assert options.languages == []


def test_copy_is_independent():
    store = {"languages": ["fr"]}
    options = Options({"x": [1]}, store=store, languages_path="languages")
    clone = options.copy()
    clone.set("x", [2])
    clone.get("delay")["short"] = 1
    assert options.get("x") == [1]
    assert options.get("delay")["short"] == 250
    assert clone.languages == ["fr"]
