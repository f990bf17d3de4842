"""
Posts persistence (raw SQL).
This module is where posts-related SQL lives.
"""

from __future__ import annotations

from typing import Any

from core import db

# Columns a partial update may touch; keys are interpolated into SQL.
UPDATABLE_COLUMNS = ("title", "content")

_SELECT_POST = """
    SELECT id, title, content, created_at, last_modified
    FROM posts
"""


async def list_all() -> list[dict[str, Any]]:
    """
    All posts, newest-created first. Insertion order breaks timestamp ties.
    """
    return await db.fetch_all(
        _SELECT_POST
        + """
        ORDER BY created_at DESC, rowid DESC
        """
    )


async def get_by_id(post_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        _SELECT_POST
        + """
        WHERE id = ?
        """,
        post_id,
    )


async def insert(
    *,
    post_id: str,
    title: str,
    content: str,
    created_at: str,
    last_modified: str,
) -> dict[str, Any]:
    async with db.transaction() as conn:
        await conn.execute(
            """
            INSERT INTO posts (id, title, content, created_at, last_modified)
            VALUES (?, ?, ?, ?, ?)
            """,
            (post_id, title, content, created_at, last_modified),
        )
        async with conn.execute(_SELECT_POST + " WHERE id = ?", (post_id,)) as cursor:
            row = await cursor.fetchone()

    if row is None:
        raise RuntimeError("Failed to insert post.")
    return row


async def update_fields(
    post_id: str,
    fields: dict[str, str],
    *,
    now: str,
) -> dict[str, Any] | None:
    """
    Overwrite exactly the columns named in `fields` and stamp `last_modified`.
    Returns the updated row, or None when the id does not resolve.

    `last_modified` becomes the later of `now` and its stored value, so it
    never moves backwards (and never drops below `created_at`).
    """
    unknown = set(fields) - set(UPDATABLE_COLUMNS)
    if unknown:
        raise ValueError(f"Cannot update columns: {', '.join(sorted(unknown))}")

    columns = [name for name in UPDATABLE_COLUMNS if name in fields]
    assignments = [f"{name} = ?" for name in columns] + ["last_modified = ?"]

    async with db.transaction() as conn:
        async with conn.execute("SELECT last_modified FROM posts WHERE id = ?", (post_id,)) as cursor:
            existing = await cursor.fetchone()
        if existing is None:
            return None

        last_modified = max(now, str(existing["last_modified"]))
        params = [fields[name] for name in columns] + [last_modified, post_id]
        await conn.execute(
            f"UPDATE posts SET {', '.join(assignments)} WHERE id = ?",
            params,
        )
        async with conn.execute(_SELECT_POST + " WHERE id = ?", (post_id,)) as cursor:
            return await cursor.fetchone()


async def delete_by_id(post_id: str) -> dict[str, Any] | None:
    """
    Delete a post and return its last stored values, or None when not found.
    """
    async with db.transaction() as conn:
        async with conn.execute(_SELECT_POST + " WHERE id = ?", (post_id,)) as cursor:
            row = await cursor.fetchone()
        if row is None:
            return None
        await conn.execute("DELETE FROM posts WHERE id = ?", (post_id,))
    return row
