"""
Async database access helpers (raw SQL) using aiosqlite.

The store is a single SQLite file (see `config.database_path()`). Every helper
opens its own connection, so no connection state is shared between requests;
SQLite's file locking serializes concurrent writers. FastAPI bootstraps the
schema on startup (see `api/main.py`).

SQL parameter style:
- sqlite uses positional placeholders: ?, ?, ?, ...
"""

from __future__ import annotations

import sqlite3
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aiosqlite

from . import config

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS posts (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL,
        last_modified TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_posts_created_at ON posts (created_at)",
)


def _row_to_dict(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {col[0]: value for col, value in zip(cursor.description, row)}


@asynccontextmanager
async def connect() -> AsyncIterator[aiosqlite.Connection]:
    """
    Open a connection to the posts database. Rows come back as dicts.
    """
    conn = await aiosqlite.connect(config.database_path(), timeout=config.database_timeout_s())
    conn.row_factory = _row_to_dict
    try:
        yield conn
    finally:
        await conn.close()


@asynccontextmanager
async def transaction() -> AsyncIterator[aiosqlite.Connection]:
    """
    Run a read-then-write sequence atomically.

    BEGIN IMMEDIATE takes the write lock up front, so the row we read cannot
    change before we write.
    """
    async with connect() as conn:
        await conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
        except BaseException:
            await conn.rollback()
            raise
        await conn.commit()


async def ensure_schema() -> None:
    async with connect() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)
        await conn.commit()


async def init_db() -> None:
    # Called once per process from the FastAPI lifespan.
    await ensure_schema()


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connect() as conn:
        async with conn.execute(sql, args) as cursor:
            return await cursor.fetchone()


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connect() as conn:
        async with conn.execute(sql, args) as cursor:
            return list(await cursor.fetchall())
