"""
Post Service

Read access to the content store plus the permalink and thumbnail helpers
used by presentation code.
"""

from __future__ import annotations

import logging

from markupsafe import escape
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.post import Post, PostStatus
from app.services.post_type_service import post_type_registry
from app.utils.sanitize import sanitize_url

logger = logging.getLogger(__name__)


class PostRepository:
    """Thin query layer over the posts table for one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, post_id: int) -> Post | None:
        """Fetch a post by primary key, whatever its type or status."""
        return await self.db.get(Post, post_id)

    async def get_by_slug(self, post_type: str, slug: str) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.post_type == post_type, Post.slug == slug))
        return result.scalars().first()

    async def random(self, post_type: str, status: PostStatus = PostStatus.PUBLISHED) -> Post | None:
        """
        Sample one post uniformly at random among those matching type and status.

        Sampling happens in the database so the eligible set is never loaded.
        """
        result = await self.db.execute(
            select(Post).where(Post.post_type == post_type, Post.status == status).order_by(func.random()).limit(1)
        )
        return result.scalars().first()

    async def list_by_type(self, post_type: str, status: PostStatus | None = PostStatus.PUBLISHED) -> list[Post]:
        """List posts of a type ordered by title; status=None lists every status."""
        query = select(Post).where(Post.post_type == post_type)
        if status is not None:
            query = query.where(Post.status == status)
        result = await self.db.execute(query.order_by(Post.title.asc(), Post.id.asc()))
        return list(result.scalars().all())

    async def exists(self, post_type: str, status: PostStatus = PostStatus.PUBLISHED) -> bool:
        result = await self.db.execute(
            select(Post.id).where(Post.post_type == post_type, Post.status == status).order_by(Post.id).limit(1)
        )
        return result.first() is not None


def get_permalink(post: Post) -> str:
    """Build the public URL of a post: {site_url}/{url_base}/{slug}/."""
    definition = post_type_registry.get(post.post_type)
    url_base = definition.url_base if definition else post.post_type
    return f"{settings.site_url.rstrip('/')}/{url_base}/{post.slug}/"


def get_thumbnail_markup(post: Post, size: str = "medium") -> str:
    """Return an <img> tag for the post's thumbnail, or "" when it has none."""
    src = sanitize_url(post.thumbnail_url)
    if not src:
        return ""
    return (
        f'<img src="{escape(src)}" '
        f'class="attachment-{escape(size)} size-{escape(size)} wp-post-image" '
        f'alt="{escape(post.title)}" />'
    )
