from __future__ import annotations

import pytest

from markd.utils.dicts import deep_merge, set_nested


def test_deep_merge_merges_nested_mappings() -> None:
    base = {"logging": {"enabled": True, "log_level": "INFO"}, "bookmarks": {"failsafe": False}}
    override = {"logging": {"log_level": "DEBUG"}}

    merged = deep_merge(base, override)

    assert merged == {"logging": {"enabled": True, "log_level": "DEBUG"}, "bookmarks": {"failsafe": False}}


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"logging": {"log_level": "INFO"}}
    override = {"logging": {"log_level": "DEBUG"}}

    deep_merge(base, override)

    assert base == {"logging": {"log_level": "INFO"}}
    assert override == {"logging": {"log_level": "DEBUG"}}


def test_deep_merge_replaces_lists() -> None:
    merged = deep_merge({"items": [1, 2, 3]}, {"items": [4]})

    assert merged == {"items": [4]}


def test_deep_merge_skips_none_overrides() -> None:
    merged = deep_merge({"bookmarks": {"file": "/a"}}, {"bookmarks": {"file": None}, "extra": None})

    assert merged == {"bookmarks": {"file": "/a"}}


def test_deep_merge_scalar_replaces_mapping() -> None:
    assert deep_merge({"logging": {"enabled": True}}, {"logging": False}) == {"logging": False}


def test_set_nested_creates_parents() -> None:
    data: dict[str, object] = {}

    set_nested(data, ["bookmarks", "failsafe"], True)

    assert data == {"bookmarks": {"failsafe": True}}


def test_set_nested_replaces_scalar_parent() -> None:
    data: dict[str, object] = {"bookmarks": "oops", "logging": {"enabled": True}}

    set_nested(data, ["bookmarks", "file"], "/x")
    set_nested(data, ["logging", "log_level"], "DEBUG")

    assert data == {"bookmarks": {"file": "/x"}, "logging": {"enabled": True, "log_level": "DEBUG"}}


def test_set_nested_rejects_empty_path() -> None:
    with pytest.raises(ValueError):
        set_nested({}, [], 1)
