"""
Role Constants

Role names and the base capabilities each role carries before any
plugin filters run.
"""

from enum import Enum


class RoleName(str, Enum):
    """Enumeration of role names in the system."""

    USER = "user"
    EDITOR = "editor"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


# Default role for new users
DEFAULT_ROLE = RoleName.USER

# Generic capability names understood by the host
CAP_READ = "read"
CAP_EDIT_POSTS = "edit_posts"
CAP_PUBLISH_POSTS = "publish_posts"
CAP_MANAGE_OPTIONS = "manage_options"

ROLE_CAPABILITIES: dict[RoleName, dict[str, bool]] = {
    RoleName.USER: {CAP_READ: True},
    RoleName.EDITOR: {CAP_READ: True, CAP_EDIT_POSTS: True, CAP_PUBLISH_POSTS: True},
    RoleName.ADMIN: {CAP_READ: True, CAP_EDIT_POSTS: True, CAP_PUBLISH_POSTS: True, CAP_MANAGE_OPTIONS: True},
    RoleName.SUPERADMIN: {CAP_READ: True, CAP_EDIT_POSTS: True, CAP_PUBLISH_POSTS: True, CAP_MANAGE_OPTIONS: True},
}


def get_role_capabilities(role: str) -> dict[str, bool]:
    """
    Return a fresh copy of the base capabilities for a role.

    Unknown roles get no capabilities.
    """
    try:
        role_enum = RoleName(role)
    except ValueError:
        return {}
    return dict(ROLE_CAPABILITIES.get(role_enum, {}))
