"""
Plugin Hook Constants

Centralised list of hook names that plugins can subscribe to.
Hook names follow the `category.action` convention.

Two kinds of hooks exist:
    actions — fired with PluginRegistry.fire_hook(); return values are collected
    filters — run with PluginRegistry.apply_filters(); each subscriber receives
              the previous subscriber's value and returns the new one
"""

from __future__ import annotations

# ── Actions ───────────────────────────────────────────────────────────────────
HOOK_MAGICIAN_BEFORE_OUTPUT = "magician.before_output"
HOOK_MAGICIAN_AFTER_OUTPUT = "magician.after_output"

# ── Filters ───────────────────────────────────────────────────────────────────
FILTER_CONTENT_RENDER = "content.render"
FILTER_USER_CAPABILITIES = "user.capabilities"
FILTER_TEMPLATE_SINGLE = "template.single"
FILTER_MAGICIAN_SHORTCODE = "magician.shortcode"

# ── Master lists ──────────────────────────────────────────────────────────────
ALL_ACTIONS: list[str] = [
    HOOK_MAGICIAN_BEFORE_OUTPUT,
    HOOK_MAGICIAN_AFTER_OUTPUT,
]

ALL_FILTERS: list[str] = [
    FILTER_CONTENT_RENDER,
    FILTER_USER_CAPABILITIES,
    FILTER_TEMPLATE_SINGLE,
    FILTER_MAGICIAN_SHORTCODE,
]

ALL_HOOKS: list[str] = ALL_ACTIONS + ALL_FILTERS
