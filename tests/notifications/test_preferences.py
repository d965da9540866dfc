from __future__ import annotations

import pytest

from src.nursery_system.nursery_system.core.exceptions import ValidationError
from src.nursery_system.nursery_system.notifications import factory
from src.nursery_system.nursery_system.notifications.preferences import (
    DEFAULT_PREFERENCES,
    load_preferences,
    update_preferences,
)


def test_defaults():
    prefs = load_preferences(None)

    assert prefs is DEFAULT_PREFERENCES
    assert prefs.email is False and prefs.push is True
    assert prefs.types["medical"] is True
    assert prefs.priorities == {"low": True, "medium": True, "high": True}


def test_stored_json_overrides_top_level_keys():
    prefs = load_preferences('{"sound": false, "priorities": {"low": false}, "unknown": 1}')

    assert prefs.sound is False
    assert prefs.desktop is True
    assert prefs.priorities == {"low": False}
    assert prefs.allows(factory.info("a", "b")) is False
    assert prefs.allows(factory.error("a", "b")) is True


def test_unreadable_json_falls_back_to_defaults():
    assert load_preferences("{not json") is DEFAULT_PREFERENCES
    assert load_preferences("[1, 2]") is DEFAULT_PREFERENCES


def test_types_without_a_toggle_are_allowed():
    prefs = load_preferences({"types": {"payment": False}})

    assert prefs.allows(factory.payment(10, "pending")) is False
    assert prefs.allows(factory.success("Saved", "Profile updated")) is True


def test_stored_group_that_is_not_an_object_keeps_defaults():
    prefs = load_preferences({"types": ["payment"], "push": False})

    assert prefs.types == DEFAULT_PREFERENCES.types
    assert prefs.push is False


def test_update_merges_toggle_groups():
    current = load_preferences({"types": {"payment": False}})
    updated = update_preferences(current, {"types": {"medical": False}, "sound": False})

    assert updated.types == {"payment": False, "medical": False}
    assert updated.sound is False
    assert load_preferences(updated.to_json()) == updated


@pytest.mark.parametrize(
    "changes",
    [
        [1, 2],
        {"sound": "off"},
        {"types": ["payment"]},
        {"priorities": {"low": 0}},
        {"volume": 11},
    ],
)
def test_update_rejects_bad_input(changes):
    with pytest.raises(ValidationError):
        update_preferences(DEFAULT_PREFERENCES, changes)
