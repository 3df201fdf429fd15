"""
Magician Plugin

Registers the `magician` post type and the [magician] shortcode, and
subscribes to:
  - user.capabilities → manage_options grants manage_magicians
  - content.render    → "trick" becomes "illusion"
  - template.single   → single magicians use single-magician.html
"""

from __future__ import annotations

import logging
from typing import Any

from app.constants.magicians import MAGICIAN_POST_TYPE, MAGICIAN_REWRITE_SLUG, MAGICIAN_SHORTCODE
from app.permissions_config.capabilities import grant_magician_capabilities
from app.plugins.base import PluginBase, PluginMeta
from app.plugins.hooks import FILTER_CONTENT_RENDER, FILTER_TEMPLATE_SINGLE, FILTER_USER_CAPABILITIES
from app.services.magician_service import render_magician_shortcode, select_magician_template
from app.services.post_type_service import PostTypeDefinition, post_type_registry
from app.services.shortcode_service import shortcode_registry
from app.utils.illusions import replace_tricks

logger = logging.getLogger(__name__)

MAGICIAN_TYPE = PostTypeDefinition(
    name=MAGICIAN_POST_TYPE,
    label="Magicians",
    public=True,
    menu_icon="dashicons-businessman",
    supports=("title", "editor", "thumbnail"),
    rewrite_slug=MAGICIAN_REWRITE_SLUG,
)

_META = PluginMeta(
    name="magicians",
    version="0.1.0",
    description="Alliance of Magicians — magician directory, featured magician and [magician] shortcode",
    author="Alliance of Magicians",
    filters=[FILTER_USER_CAPABILITIES, FILTER_CONTENT_RENDER, FILTER_TEMPLATE_SINGLE],
    config_schema={
        "illusion_wording": {"type": "boolean", "default": True},
    },
)


class MagicianPlugin(PluginBase):
    """Magician directory plugin."""

    def __init__(self) -> None:
        self._config: dict[str, Any] = {}

    @property
    def meta(self) -> PluginMeta:
        return _META

    async def on_load(self, config: dict[str, Any]) -> None:
        self._config = config
        post_type_registry.register(MAGICIAN_TYPE)
        shortcode_registry.add(MAGICIAN_SHORTCODE, render_magician_shortcode)

    async def on_unload(self) -> None:
        shortcode_registry.remove(MAGICIAN_SHORTCODE)
        post_type_registry.unregister(MAGICIAN_POST_TYPE)

    async def apply_filter(self, filter_name: str, value: Any, payload: dict[str, Any]) -> Any:
        if filter_name == FILTER_USER_CAPABILITIES:
            return grant_magician_capabilities(value)
        if filter_name == FILTER_CONTENT_RENDER:
            if not self._config.get("illusion_wording", True):
                return value
            return replace_tricks(value)
        if filter_name == FILTER_TEMPLATE_SINGLE:
            return select_magician_template(value, payload.get("post"))
        return value
