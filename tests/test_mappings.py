"""Tests for mapping ownership."""

from cocoda_utils.mappings import user_owns_mapping, user_uris

USER = {
    "uri": "https://example.org/users/1",
    "identities": {
        "github": {"uri": "https://github.com/jo"},
        "orcid": {"uri": "https://orcid.org/0000-0002-1825-0097"},
        "other": {},
    },
}


def _mapping(uri):
    return {"creator": [{"uri": uri, "prefLabel": {"en": "Jo"}}]}


def test_user_uris():
    assert user_uris(USER) == {
        "https://example.org/users/1",
        "https://github.com/jo",
        "https://orcid.org/0000-0002-1825-0097",
    }
    assert user_uris({}) == set()


def test_owner_by_primary_uri():
    assert user_owns_mapping(USER, _mapping("https://example.org/users/1"))


def test_owner_by_identity():
    assert user_owns_mapping(USER, _mapping("https://github.com/jo"))


def test_not_owner():
    assert not user_owns_mapping(USER, _mapping("https://example.org/users/2"))
    assert not user_owns_mapping(USER, {"creator": []})
    assert not user_owns_mapping(USER, {})


def test_missing_arguments():
    assert not user_owns_mapping(None, _mapping("https://github.com/jo"))
    assert not user_owns_mapping(USER, None)


def test_malformed_records():
    user = {"uri": ["x"], "identities": {"a": {"uri": {"b": 1}}, "b": {"uri": "https://github.com/jo"}}}
    assert user_uris(user) == {"https://github.com/jo"}
    assert not user_owns_mapping(user, {"creator": [{"uri": ["https://github.com/jo"]}]})
