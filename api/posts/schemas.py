"""
Pydantic schemas for the posts endpoints.

Request bodies keep every field optional: presence and emptiness are judged by
`validators`, which report all problems at once.
"""

from __future__ import annotations

from pydantic import BaseModel


class PostCreate(BaseModel):
    title: str | None = None
    content: str | None = None


class PostUpdate(BaseModel):
    title: str | None = None
    content: str | None = None

    def changes(self) -> dict[str, str]:
        """
        Only the fields the caller supplied, ready for a partial update.
        """
        return {
            name: value
            for name, value in (("title", self.title), ("content", self.content))
            if value is not None
        }


class Post(BaseModel):
    id: str
    title: str
    content: str
    created_at: str
    last_modified: str
