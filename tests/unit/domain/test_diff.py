"""Tests for restcrud/domain/services/diff.py."""

from typing import Any, ClassVar

from restcrud.domain.models import CrudModel
from restcrud.domain.services.diff import compute_diff, update_body, values_equal


class Note(CrudModel):
    path: ClassVar[str] = "notes"

    title: str
    body: str | None = None
    labels: list[str] = []
    meta: dict[str, Any] = {}


# --- compute_diff ---

def test_identical_representations_have_empty_diff():
    doc = {"id": 1, "title": "a", "labels": ["x"], "meta": {"k": 1}}
    assert compute_diff(doc, dict(doc)) == {}


def test_changed_field_carries_new_value():
    assert compute_diff({"id": 1, "title": "b"}, {"id": 1, "title": "a"}) == {"title": "b"}


def test_removed_field_maps_to_null():
    assert compute_diff({"id": 1}, {"id": 1, "body": "x"}) == {"body": None}


def test_added_field_carries_value():
    assert compute_diff({"id": 1, "body": "x"}, {"id": 1}) == {"body": "x"}


def test_unchanged_fields_are_omitted():
    diff = compute_diff({"id": 1, "title": "a", "body": "new"}, {"id": 1, "title": "a", "body": "old"})
    assert diff == {"body": "new"}


def test_changed_list_sends_whole_list():
    assert compute_diff({"labels": ["x", "y"]}, {"labels": ["x"]}) == {"labels": ["x", "y"]}


def test_reordered_list_is_a_change():
    assert compute_diff({"labels": ["y", "x"]}, {"labels": ["x", "y"]}) == {"labels": ["y", "x"]}


def test_nested_mapping_compared_structurally():
    assert compute_diff({"meta": {"a": [1, 2]}}, {"meta": {"a": [1, 2]}}) == {}


def test_boolean_and_integer_are_different():
    assert compute_diff({"flag": True}, {"flag": 1}) == {"flag": True}


def test_integer_and_float_with_same_value_are_equal():
    assert compute_diff({"n": 1}, {"n": 1.0}) == {}


# --- values_equal ---

def test_values_equal_scalar():
    assert values_equal("a", "a")


def test_values_equal_list_vs_scalar():
    assert not values_equal([1], 1)


def test_values_equal_mapping_key_mismatch():
    assert not values_equal({"a": 1}, {"b": 1})


def test_values_equal_none():
    assert values_equal(None, None)
    assert not values_equal(None, 0)


# --- update_body ---

def test_update_body_without_previous_is_full_representation():
    note = Note(id=3, title="t", body="b")
    assert update_body(note) == {"id": 3, "title": "t", "body": "b", "labels": [], "meta": {}}


def test_update_body_with_previous_is_diff():
    old = Note(id=3, title="t", body="b", labels=["x"])
    new = Note(id=3, title="t2", labels=["x"])
    assert update_body(new, old) == {"title": "t2", "body": None}


def test_update_body_same_record_is_empty():
    note = Note(id=3, title="t")
    assert update_body(note, note.model_copy()) == {}


def test_update_body_falls_back_when_previous_not_serialisable():
    old = Note(id=3, title="t", meta={"bad": object()})
    new = Note(id=3, title="t")
    assert update_body(new, old) == new.to_json()
