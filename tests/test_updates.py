from __future__ import annotations

from user_api.domain.updates import UNSET, UserUpdate, merge


def test_empty_update_yields_empty_write_set():
    write_set = merge(7, UserUpdate())
    assert write_set.user_id == 7
    assert write_set.values == {}
    assert write_set.is_empty


def test_only_supplied_fields_are_written():
    write_set = merge(1, UserUpdate(name="A"))
    assert write_set.values == {"name": "A"}


def test_empty_string_is_an_explicit_value():
    write_set = merge(1, UserUpdate(name="", email="x@example.com"))
    assert write_set.values == {"name": "", "email": "x@example.com"}


def test_null_is_treated_as_absent():
    assert merge(1, UserUpdate(email=None)).values == {}


def test_from_mapping_ignores_unknown_keys():
    update = UserUpdate.from_mapping({"email": "b@example.com", "deleted": True})
    assert update.name is UNSET
    assert update.email == "b@example.com"
    assert merge(3, update).values == {"email": "b@example.com"}
