"""
Posts business logic.

Every handler validates its input before touching storage, checks existence
before mutating, and returns the JSON envelope the router sends back.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import aiosqlite

from core.errors import MissingIdError, NotFoundError, StorageError, ValidationError

from . import repository, schemas, validators

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def _utc_now() -> str:
    # Fixed-width UTC text: lexical order is chronological order.
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def _new_post_id() -> str:
    return str(uuid.uuid4())


def _require_id(post_id: str | None) -> str:
    post_id = (post_id or "").strip()
    if not post_id:
        raise MissingIdError()
    return post_id


def _to_post(row: dict[str, Any]) -> dict[str, Any]:
    return schemas.Post(
        id=str(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
        created_at=str(row["created_at"]),
        last_modified=str(row["last_modified"]),
    ).model_dump()


@asynccontextmanager
async def _storage(action: str) -> AsyncIterator[None]:
    """
    Map driver faults to StorageError, keeping the driver message.
    """
    try:
        yield
    except aiosqlite.Error as exc:
        logger.exception("storage_failed action=%r", action)
        raise StorageError(f"Failed to {action}: {exc}") from exc


async def list_posts() -> dict[str, Any]:
    async with _storage("fetch posts"):
        rows = await repository.list_all()
    posts = [_to_post(row) for row in rows]
    return {"success": True, "data": posts, "count": len(posts)}


async def get_post(post_id: str | None) -> dict[str, Any]:
    post_id = _require_id(post_id)
    async with _storage("fetch post"):
        row = await repository.get_by_id(post_id)
    if row is None:
        raise NotFoundError()
    return {"success": True, "data": _to_post(row)}


async def create_post(payload: schemas.PostCreate | None) -> dict[str, Any]:
    data = payload.model_dump() if payload is not None else {}
    errors = validators.validate_for_create(data)
    if errors:
        raise ValidationError(errors)

    now = _utc_now()
    async with _storage("create post"):
        row = await repository.insert(
            post_id=_new_post_id(),
            title=str(data["title"]),
            content=str(data["content"]),
            created_at=now,
            last_modified=now,
        )

    logger.info("post_created id=%s", row["id"])
    return {
        "success": True,
        "message": "Post created successfully",
        "data": _to_post(row),
    }


async def update_post(post_id: str | None, payload: schemas.PostUpdate | None) -> dict[str, Any]:
    post_id = _require_id(post_id)
    payload = payload or schemas.PostUpdate()
    errors = validators.validate_for_update(payload.model_dump())
    if errors:
        raise ValidationError(errors)

    async with _storage("update post"):
        row = await repository.update_fields(post_id, payload.changes(), now=_utc_now())
    if row is None:
        raise NotFoundError()

    logger.info("post_updated id=%s fields=%s", post_id, ",".join(sorted(payload.changes())))
    return {
        "success": True,
        "message": "Post updated successfully",
        "data": _to_post(row),
    }


async def delete_post(post_id: str | None) -> dict[str, Any]:
    post_id = _require_id(post_id)
    async with _storage("delete post"):
        row = await repository.delete_by_id(post_id)
    if row is None:
        raise NotFoundError()

    logger.info("post_deleted id=%s", post_id)
    return {
        "success": True,
        "message": "Post deleted successfully",
        "deleted_post": _to_post(row),
    }
