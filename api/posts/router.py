"""
FastAPI router for the posts resource.

Each route also answers with a trailing slash (`/posts/`, `/posts/{id}/`);
the app does not redirect slashes.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.errors import MissingIdError

from . import schemas, service

router = APIRouter()


@router.get("/posts")
@router.get("/posts/", include_in_schema=False)
async def list_posts() -> dict:
    """
    All posts, newest first, with a count.
    """
    return await service.list_posts()


@router.get("/posts/{post_id}")
@router.get("/posts/{post_id}/", include_in_schema=False)
async def get_post(post_id: str) -> dict:
    return await service.get_post(post_id)


@router.post("/posts", status_code=status.HTTP_201_CREATED)
@router.post("/posts/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_post(payload: schemas.PostCreate | None = None) -> dict:
    return await service.create_post(payload)


# POST always creates; an id in the path is ignored and a fresh one assigned.
@router.post("/posts/{post_id}", status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/posts/{post_id}/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_post_ignoring_id(post_id: str, payload: schemas.PostCreate | None = None) -> dict:
    _ = post_id
    return await service.create_post(payload)


@router.patch("/posts/{post_id}")
@router.patch("/posts/{post_id}/", include_in_schema=False)
async def update_post(post_id: str, payload: schemas.PostUpdate | None = None) -> dict:
    """
    Partial update: only the supplied fields change, `last_modified` is refreshed.
    """
    return await service.update_post(post_id, payload)


@router.delete("/posts/{post_id}")
@router.delete("/posts/{post_id}/", include_in_schema=False)
async def delete_post(post_id: str) -> dict:
    """
    Delete a post and echo its last stored values back for confirmation/undo.
    """
    return await service.delete_post(post_id)


# PATCH/DELETE need an id; answer 400 instead of a bare 405.
@router.patch("/posts", include_in_schema=False)
@router.patch("/posts/", include_in_schema=False)
@router.delete("/posts", include_in_schema=False)
@router.delete("/posts/", include_in_schema=False)
async def missing_post_id() -> dict:
    raise MissingIdError()
