"""Tests for the CocodaUtils facade."""

from cocoda_utils.options import Options
from cocoda_utils.utils import CocodaUtils


def test_initialize_without_options():
    utils = CocodaUtils()
    assert isinstance(utils, CocodaUtils)
    assert isinstance(utils.get_option("languages"), list)


def test_set_option():
    utils = CocodaUtils()
    new_value = ["de", "en", "fr"]
    utils.set_option("languages", new_value)
    assert utils.get_option("languages") == new_value


def test_instances_are_independent():
    a = CocodaUtils()
    b = CocodaUtils()
    a.set_option("languages", ["fr"])
    assert b.get_option("languages") == ["en", "de"]


def test_overrides():
    utils = CocodaUtils(languages=["de"])
    item = {"prefLabel": {"en": "English label", "de": "German label"}}
    assert utils.pref_label(item) == "German label"
    assert utils.pref_label(item, "en") == "English label"
    assert utils.get_language({"fr": "x"}) == "fr"


def test_injected_options_are_live():
    options = Options()
    utils = CocodaUtils(options)
    item = {"definition": {"en": "Def", "de": "Definition"}}
    assert utils.definition(item) == ["Def"]
    options.set("languages", ["de"])
    assert utils.definition(item) == ["Definition"]


def test_leaf_helpers():
    utils = CocodaUtils()
    assert utils.hash("hello world") == CocodaUtils.hash("hello world")
    assert 18 <= len(utils.generate_id()) <= 24
    assert utils.date_to_string("nope") == "?"
    assert utils.registry_stored({"stored": True})
    assert utils.annotations_helper.creator_matches({"creator": "u1"}, ["u1"])
    assert utils.notation({"notation": ["test"]}, "scheme") == "TEST"
    assert utils.language_map_content({"en": "x"}) == "x"
    assert not utils.user_owns_mapping(None, None)


def test_license_badge():
    utils = CocodaUtils()
    badge = utils.license_badge("http://creativecommons.org/publicdomain/zero/1.0/")
    assert badge.endswith("cc-zero.svg")
    assert utils.license_badge("http://example.org/license") is None


def test_overrides_do_not_leak_into_shared_options():
    shared = Options()
    german = CocodaUtils(shared, languages=["de"])
    plain = CocodaUtils(shared)
    assert german.get_option("languages") == ["de"]
    assert plain.get_option("languages") == ["en", "de"]
    assert shared.get("languages") == ["en", "de"]
