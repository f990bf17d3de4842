"""
Field validation for post bodies. Pure functions; errors are collected, not
short-circuited.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _is_utf8(value: Any) -> bool:
    # JSON can carry lone surrogates ("\ud800") that no UTF-8 store accepts.
    try:
        str(value).encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _encoding_errors(title: Any, content: Any) -> list[str]:
    errors: list[str] = []
    if not _is_blank(title) and not _is_utf8(title):
        errors.append("Title must be valid UTF-8 text")
    if not _is_blank(content) and not _is_utf8(content):
        errors.append("Content must be valid UTF-8 text")
    return errors


def validate_for_create(data: Mapping[str, Any] | None) -> list[str]:
    data = data or {}
    title = data.get("title")
    content = data.get("content")

    errors: list[str] = []
    if _is_blank(title):
        errors.append("Title is required")
    if _is_blank(content):
        errors.append("Content is required")
    return errors + _encoding_errors(title, content)


def validate_for_update(data: Mapping[str, Any] | None) -> list[str]:
    data = data or {}
    title = data.get("title")
    content = data.get("content")

    errors: list[str] = []
    if title is not None and _is_blank(title):
        errors.append("Title cannot be empty")
    if content is not None and _is_blank(content):
        errors.append("Content cannot be empty")
    if _is_blank(title) and _is_blank(content):
        errors.append("At least one field (title or content) must be provided")
    return errors + _encoding_errors(title, content)
