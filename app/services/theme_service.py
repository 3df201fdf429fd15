"""
Theme Service

Template lookup for single pages and the content rendering pipeline.

Single pages follow a template hierarchy resolved against the theme
directory, most specific first:

    single-{post_type}-{slug}.html
    single-{post_type}.html
    single.html
    singular.html
    index.html

The result then passes through the `template.single` filter so plugins can
supply their own template.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.plugins.hooks import FILTER_CONTENT_RENDER, FILTER_TEMPLATE_SINGLE
from app.plugins.registry import plugin_registry
from app.services.shortcode_service import shortcode_registry
from app.templating import TEMPLATES_DIR

if TYPE_CHECKING:
    from app.models.post import Post

logger = logging.getLogger(__name__)

THEME_NAME = "theme"
THEME_DIR = TEMPLATES_DIR / THEME_NAME


def single_template_candidates(post: Post) -> list[str]:
    return [
        f"single-{post.post_type}-{post.slug}.html",
        f"single-{post.post_type}.html",
        "single.html",
        "singular.html",
        "index.html",
    ]


def locate_template(candidates: list[str], theme_dir: Path = THEME_DIR) -> str:
    """Return the first candidate present in the theme, as a loader name, or ""."""
    for name in candidates:
        if (theme_dir / name).is_file():
            return f"{theme_dir.name}/{name}"
    return ""


async def get_single_template(post: Post, theme_dir: Path = THEME_DIR) -> str:
    """Resolve the template for a single post, letting plugins override it."""
    template = locate_template(single_template_candidates(post), theme_dir)
    template = await plugin_registry.apply_filters(FILTER_TEMPLATE_SINGLE, template, {"post": post})
    logger.debug("Single template for post %s: %s", post.id, template)
    return template


async def render_content(content: str, context: dict[str, Any] | None = None) -> str:
    """Run content through the `content.render` filter, then expand shortcodes."""
    content = await plugin_registry.apply_filters(FILTER_CONTENT_RENDER, content or "", context or {})
    return await shortcode_registry.do_shortcodes(content, context)
