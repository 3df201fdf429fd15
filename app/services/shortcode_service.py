"""
Shortcode Service

Expands `[tag attr="value"]` shortcodes embedded in content.  Handlers are
registered per tag and awaited with the parsed attributes and a request
context dict.  Unregistered tags are left untouched, and a doubled bracket
(`[[tag]]`) renders the shortcode literally.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

ShortcodeHandler = Callable[[dict[str, str], dict[str, Any]], Awaitable[str]]

SHORTCODE_PATTERN = re.compile(
    r"(?P<open>\[?)\[(?P<tag>[\w-]+)(?P<atts>(?:\s[^\[\]]*?)?)\s*/?\](?P<close>\]?)"
)
ATTRIBUTE_PATTERN = re.compile(
    r"""(?P<name>[\w-]+)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"']+))"""
)


def parse_shortcode_atts(text: str) -> dict[str, str]:
    """Parse `name="value"` pairs; names are lower-cased."""
    atts: dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(text or ""):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        if value is None:
            value = match.group("bare")
        atts[match.group("name").lower()] = value
    return atts


def shortcode_atts(defaults: dict[str, Any], atts: dict[str, Any] | None) -> dict[str, Any]:
    """Merge supplied attributes over defaults, dropping unknown names."""
    atts = atts or {}
    return {name: atts.get(name, default) for name, default in defaults.items()}


class ShortcodeRegistry:
    """Maps shortcode tags to their async handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, ShortcodeHandler] = {}

    def add(self, tag: str, handler: ShortcodeHandler) -> None:
        self._handlers[tag] = handler
        logger.info("Shortcode registered: [%s]", tag)

    def remove(self, tag: str) -> None:
        self._handlers.pop(tag, None)

    def has(self, tag: str) -> bool:
        return tag in self._handlers

    async def do_shortcodes(self, content: str, context: dict[str, Any] | None = None) -> str:
        """Replace every registered shortcode in content with its handler's output."""
        if not content or "[" not in content:
            return content

        context = context or {}
        parts: list[str] = []
        position = 0
        for match in SHORTCODE_PATTERN.finditer(content):
            handler = self._handlers.get(match.group("tag"))
            if handler is None:
                continue

            parts.append(content[position:match.start()])
            position = match.end()

            if match.group("open") and match.group("close"):
                # [[tag]] escapes the shortcode
                parts.append(match.group(0)[1:-1])
                continue

            try:
                rendered = await handler(parse_shortcode_atts(match.group("atts")), context)
            except Exception as exc:
                logger.warning("Shortcode [%s] raised: %s", match.group("tag"), exc)
                rendered = ""
            parts.append(match.group("open") + (rendered or "") + match.group("close"))

        parts.append(content[position:])
        return "".join(parts)


shortcode_registry = ShortcodeRegistry()
