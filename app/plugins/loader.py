"""
Plugin Loader

Reads plugin configuration from the plugins config file and initialises
all built-in plugins at application startup.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.config import settings

if TYPE_CHECKING:
    from app.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)

# ── Default plugin config (all built-in plugins enabled) ─────────────────────
_DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "magicians": {"enabled": True},
}


def load_plugins_config(path: Path | None = None) -> dict[str, dict[str, Any]]:
    """
    Load plugin configuration from disk.

    Returns defaults if the file does not exist or cannot be parsed.
    """
    config_file = path or Path(settings.plugins_config_file)
    if config_file.exists():
        try:
            return json.loads(config_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Failed to read plugins config: %s", exc)
    return copy.deepcopy(_DEFAULT_CONFIG)


async def initialize_plugins(registry: PluginRegistry, config: dict[str, dict[str, Any]] | None = None) -> None:
    """
    Load and register all enabled built-in plugins.

    Called from main.py lifespan().  Deferred imports inside this function
    prevent circular imports at module load time.
    """
    from app.plugins.magician_plugin import MagicianPlugin

    if config is None:
        config = load_plugins_config()

    loaded = 0
    for plugin_class in [MagicianPlugin]:
        plugin = plugin_class()
        plugin_config = config.get(plugin.meta.name, {})
        if not plugin_config.get("enabled", True):
            logger.info("Plugin disabled by config: %s", plugin.meta.name)
            continue
        await plugin.on_load(plugin_config)
        registry.register(plugin)
        loaded += 1

    logger.info("Plugin initialisation complete — %d plugins loaded", loaded)
