"""
Plugin Base Classes

PluginMeta: declarative metadata for a plugin (name, version, hooks, config schema).
PluginBase: abstract base class all plugins must subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class PluginMeta:
    """
    Declarative metadata describing a plugin.

    Attributes:
        name:          Machine-readable slug, e.g. "magicians".
        version:       Semver string, e.g. "0.1.0".
        description:   Human-readable description.
        author:        Plugin author (defaults to "CMS Core Team").
        hooks:         Action hook names this plugin subscribes to.
        filters:       Filter hook names this plugin subscribes to.
        config_schema: JSON Schema fragments describing configurable options.
    """

    name: str
    version: str
    description: str
    author: str = "CMS Core Team"
    hooks: list[str] = field(default_factory=list)
    filters: list[str] = field(default_factory=list)
    config_schema: dict[str, Any] = field(default_factory=dict)


class PluginBase(ABC):
    """
    Abstract base class for all CMS plugins.

    Subclasses must implement the `meta` property.
    All lifecycle methods have default no-op implementations so subclasses only
    override what they need.
    """

    @property
    @abstractmethod
    def meta(self) -> PluginMeta:
        """Return the plugin's metadata."""
        ...

    async def on_load(self, config: dict[str, Any]) -> None:  # noqa: B027
        """
        Called once at startup with the plugin's persisted config dict.

        Override to perform one-time initialisation (e.g. register post types).
        """

    async def on_unload(self) -> None:  # noqa: B027
        """Called when the plugin is removed from the registry."""

    async def handle_hook(self, hook_name: str, payload: dict[str, Any]) -> Any:
        """
        Receive and process an action hook.

        Called by PluginRegistry.fire_hook() for each hook the plugin
        declared in PluginMeta.hooks.  Default implementation is a no-op.
        """
        return None

    async def apply_filter(self, filter_name: str, value: Any, payload: dict[str, Any]) -> Any:
        """
        Transform a value passed through a filter hook.

        Called by PluginRegistry.apply_filters() for each filter the plugin
        declared in PluginMeta.filters.  Default implementation returns the
        value unchanged.

        Args:
            filter_name: The filter constant, e.g. "content.render".
            value:       The value produced by the previous subscriber.
            payload:     Read-only context supplied by the caller.

        Returns:
            The (possibly transformed) value.
        """
        return value
