"""
Capability checks.

A user's capabilities start from their role's base set and then pass
through the `user.capabilities` filter, where plugins may grant derived
capabilities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.magicians import CAP_MANAGE_MAGICIANS
from app.constants.roles import CAP_MANAGE_OPTIONS, get_role_capabilities
from app.plugins.hooks import FILTER_USER_CAPABILITIES
from app.plugins.registry import plugin_registry

if TYPE_CHECKING:
    from app.models.user import User


def grant_magician_capabilities(caps: dict[str, bool]) -> dict[str, bool]:
    """
    Anyone who can manage site settings can manage magicians.

    Returns a new dict; the input is never modified and no capability is
    ever removed, so applying this twice is the same as applying it once.
    """
    granted = dict(caps)
    if granted.get(CAP_MANAGE_OPTIONS):
        granted[CAP_MANAGE_MAGICIANS] = True
    return granted


async def get_user_capabilities(user: User) -> dict[str, bool]:
    """Return the filtered capability map for a user."""
    base = get_role_capabilities(user.role)
    return await plugin_registry.apply_filters(FILTER_USER_CAPABILITIES, base, {"user": user})


async def user_can(user: User, capability: str) -> bool:
    caps = await get_user_capabilities(user)
    return bool(caps.get(capability))
