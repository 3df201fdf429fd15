"""
Plugin Registry

PluginRegistry: in-process registry that stores registered plugins and
dispatches action and filter hooks to subscribers.

Actions are fire-and-forget: each subscriber's handle_hook() is awaited in
sequence; exceptions are caught, logged, and execution continues.

Filters are chained: each subscriber's apply_filter() receives the value
returned by the previous one.  A subscriber that raises is skipped and the
value passes through unchanged.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.plugins.base import PluginBase

logger = logging.getLogger(__name__)


class PluginRegistry:
    """
    In-process registry for CMS plugins.

    Stores registered plugins by name and maintains an index of hook and
    filter subscriptions for efficient dispatch.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, PluginBase] = {}
        self._hook_subscriptions: dict[str, list[PluginBase]] = defaultdict(list)
        self._filter_subscriptions: dict[str, list[PluginBase]] = defaultdict(list)

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, plugin: PluginBase) -> None:
        """Register a plugin and index its subscriptions.

        Registering a name twice replaces the earlier plugin.
        """
        if plugin.meta.name in self._plugins:
            self._drop(plugin.meta.name)
        self._plugins[plugin.meta.name] = plugin
        for hook in plugin.meta.hooks:
            self._hook_subscriptions[hook].append(plugin)
        for filter_name in plugin.meta.filters:
            self._filter_subscriptions[filter_name].append(plugin)
        logger.info("Plugin registered: %s v%s", plugin.meta.name, plugin.meta.version)

    async def unregister(self, name: str) -> None:
        """Remove a plugin and call its on_unload()."""
        plugin = self._drop(name)
        if plugin is not None:
            await plugin.on_unload()
            logger.info("Plugin unregistered: %s", name)

    def _drop(self, name: str) -> PluginBase | None:
        plugin = self._plugins.pop(name, None)
        if plugin is None:
            return None
        for subscribers in (*self._hook_subscriptions.values(), *self._filter_subscriptions.values()):
            if plugin in subscribers:
                subscribers.remove(plugin)
        return plugin

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, name: str) -> PluginBase | None:
        """Return the plugin with the given name, or None if not registered."""
        return self._plugins.get(name)

    def all_plugins(self) -> list[PluginBase]:
        """Return all registered plugins in registration order."""
        return list(self._plugins.values())

    def is_registered(self, name: str) -> bool:
        """Return True if a plugin with the given name has been registered."""
        return name in self._plugins

    # ── Hook dispatch ─────────────────────────────────────────────────────────

    async def fire_hook(self, hook_name: str, payload: dict[str, Any]) -> list[Any]:
        """
        Fire an action hook to all subscribing plugins.

        Each plugin's handle_hook() is called in turn.  Exceptions are caught
        and logged — a misbehaving plugin never prevents others from running or
        blocks request processing.

        Returns:
            List of return values from each subscriber (None for no-ops).
        """
        results: list[Any] = []
        for plugin in self._hook_subscriptions.get(hook_name, []):
            try:
                result = await plugin.handle_hook(hook_name, payload)
                results.append(result)
            except Exception as exc:
                logger.warning(
                    "Plugin %s hook %s raised: %s",
                    plugin.meta.name,
                    hook_name,
                    exc,
                )
        return results

    async def apply_filters(self, filter_name: str, value: Any, payload: dict[str, Any] | None = None) -> Any:
        """
        Pass a value through every subscriber of a filter hook.

        Args:
            filter_name: Filter constant from app.plugins.hooks.
            value:       Initial value.
            payload:     Context passed unchanged to each subscriber.

        Returns:
            The value returned by the last subscriber, or the initial value
            when nothing is subscribed.
        """
        context = payload or {}
        for plugin in self._filter_subscriptions.get(filter_name, []):
            try:
                value = await plugin.apply_filter(filter_name, value, context)
            except Exception as exc:
                logger.warning(
                    "Plugin %s filter %s raised: %s",
                    plugin.meta.name,
                    filter_name,
                    exc,
                )
        return value


# ── Global singleton ──────────────────────────────────────────────────────────
# Import this wherever you need to fire hooks or inspect registered plugins.
plugin_registry = PluginRegistry()
