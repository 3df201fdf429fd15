"""
Magician Service

Resolves identifiers and selection modes to a valid, publicly presentable
magician, and formats magicians for the shortcode and the REST API.

Every resolve_* method returns either a published magician or None.  A
record that exists but has the wrong type or status is indistinguishable
from one that does not exist, so non-public records never leak.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from markupsafe import escape

from app.constants.magicians import (
    FEATURED_MAGICIAN_OPTION,
    MAGICIAN_POST_TYPE,
    MAGICIAN_SINGLE_TEMPLATE,
)
from app.models.post import Post, PostStatus
from app.plugins.hooks import FILTER_MAGICIAN_SHORTCODE
from app.plugins.registry import plugin_registry
from app.services.post_service import get_permalink, get_thumbnail_markup
from app.services.shortcode_service import shortcode_atts

if TYPE_CHECKING:
    from app.services.option_service import OptionStore
    from app.services.post_service import PostRepository

logger = logging.getLogger(__name__)


def parse_record_id(value: Any) -> int | None:
    """
    Return the id named by a positive int or a string of digits, else None.

    Partial matches such as "7abc" or "7.9" name nothing.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        digits = value.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits) or None
    return None


def is_id_unset(value: Any) -> bool:
    # Blank and zero ids mean "not supplied"
    return value is None or value in ("", "0", 0)


def is_public_magician(post: Post | None) -> bool:
    return post is not None and post.post_type == MAGICIAN_POST_TYPE and post.status == PostStatus.PUBLISHED


class MagicianSelector:
    """
    Read-only selection of magicians.

    Args:
        posts:   Repository over the content store for the current request.
        options: Option store holding the featured magician id.
    """

    def __init__(self, posts: PostRepository, options: OptionStore):
        self.posts = posts
        self.options = options

    async def resolve_by_id(self, magician_id: Any) -> Post | None:
        """Return the magician with this id if it is published, else None."""
        record_id = parse_record_id(magician_id)
        if record_id is None:
            return None
        post = await self.posts.get(record_id)
        if is_public_magician(post):
            return post
        return None

    async def resolve_featured(self) -> Post | None:
        """Return the featured magician, re-validated on every read."""
        return await self.resolve_by_id(self.options.get(FEATURED_MAGICIAN_OPTION, 0))

    async def resolve_random(self) -> Post | None:
        """Return a uniformly sampled published magician, or None if there are none."""
        return await self.posts.random(MAGICIAN_POST_TYPE, PostStatus.PUBLISHED)

    async def resolve_for_shortcode(self, requested_id: Any = None) -> Post | None:
        """
        A supplied id behaves exactly like resolve_by_id, so a malformed or
        negative id finds nothing.  Only a blank or zero id falls back to the
        featured magician.
        """
        if is_id_unset(requested_id):
            return await self.resolve_featured()
        return await self.resolve_by_id(requested_id)

    async def have_magicians(self) -> bool:
        return await self.posts.exists(MAGICIAN_POST_TYPE, PostStatus.PUBLISHED)

    async def list_magicians(self) -> list[Post]:
        """Published magicians ordered by title, for the settings dropdown."""
        return await self.posts.list_by_type(MAGICIAN_POST_TYPE, PostStatus.PUBLISHED)


# ── Presentation ──────────────────────────────────────────────────────────────


def build_magician_response(magician: Post | None) -> dict[str, str]:
    """REST payload for a magician; an empty object when there is none."""
    if magician is None:
        return {}
    return {
        "name": magician.title,
        "url": get_permalink(magician),
        "photo": get_thumbnail_markup(magician, "medium"),
    }


async def render_magician_shortcode(atts: dict[str, str], context: dict[str, Any]) -> str:
    """
    Handler for [magician] and [magician id="N"].

    Renders a link to the magician, passed through the `magician.shortcode`
    filter so other plugins can override the markup.  Renders nothing when
    no valid magician is found.
    """
    selector: MagicianSelector | None = context.get("selector")
    if selector is None:
        logger.debug("[magician] rendered without a selector in context")
        return ""
    atts = shortcode_atts({"id": None}, atts)

    magician = await selector.resolve_for_shortcode(atts["id"])
    if magician is None:
        return ""

    output = f'<a href="{escape(get_permalink(magician))}">{escape(magician.title)}</a>'
    return await plugin_registry.apply_filters(
        FILTER_MAGICIAN_SHORTCODE,
        output,
        {"magician": magician, "atts": atts},
    )


def select_magician_template(template: str, post: Post | None) -> str:
    """
    Use the plugin's single-magician template when the theme would otherwise
    fall back to a generic single template.

    A theme can still override it with single-magician.html or
    single-magician-{slug}.html.
    """
    if post is not None and post.post_type == MAGICIAN_POST_TYPE and (
        template == "" or template.endswith("single.html")
    ):
        return MAGICIAN_SINGLE_TEMPLATE
    return template
