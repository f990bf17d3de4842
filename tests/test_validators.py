from __future__ import annotations

from posts import validators


def test_create_accepts_title_and_content():
    assert validators.validate_for_create({"title": "A", "content": "B"}) == []


def test_create_collects_every_missing_field():
    assert validators.validate_for_create({}) == ["Title is required", "Content is required"]
    assert validators.validate_for_create(None) == ["Title is required", "Content is required"]


def test_create_treats_blank_as_missing():
    assert validators.validate_for_create({"title": "   ", "content": "B"}) == ["Title is required"]


def test_update_single_field_is_enough():
    assert validators.validate_for_update({"content": "new"}) == []
    assert validators.validate_for_update({"title": "new", "content": None}) == []


def test_update_rejects_present_but_empty_fields():
    errors = validators.validate_for_update({"title": "", "content": "B"})
    assert errors == ["Title cannot be empty"]


def test_update_requires_at_least_one_field():
    errors = validators.validate_for_update({})
    assert errors == ["At least one field (title or content) must be provided"]


def test_update_reports_all_problems_at_once():
    errors = validators.validate_for_update({"title": "", "content": ""})
    assert errors == [
        "Title cannot be empty",
        "Content cannot be empty",
        "At least one field (title or content) must be provided",
    ]


def test_lone_surrogates_are_rejected():
    assert validators.validate_for_create({"title": "\ud800", "content": "B"}) == [
        "Title must be valid UTF-8 text"
    ]
    assert validators.validate_for_update({"content": "bad \udfff"}) == [
        "Content must be valid UTF-8 text"
    ]
