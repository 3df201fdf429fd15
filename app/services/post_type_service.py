"""
Post Type Registry

Keeps the definitions of the content types the site knows about.  Plugins
register their own types from on_load(); the built-in "post" type is always
present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostTypeDefinition:
    """
    Declarative description of a post type.

    Attributes:
        name:         Machine name stored on Post.post_type.
        label:        Plural human-readable label.
        public:       Whether single pages are served at /{rewrite_slug}/{slug}.
        menu_icon:    Admin menu icon name.
        supports:     Editor features enabled for the type.
        rewrite_slug: URL base for permalinks; defaults to the type name.
    """

    name: str
    label: str
    public: bool = True
    menu_icon: str | None = None
    supports: tuple[str, ...] = field(default=("title", "editor"))
    rewrite_slug: str | None = None

    @property
    def url_base(self) -> str:
        return self.rewrite_slug or self.name


BUILTIN_POST = PostTypeDefinition(name="post", label="Posts", rewrite_slug="posts", supports=("title", "editor", "thumbnail"))


class PostTypeRegistry:
    """Registry of post type definitions, looked up by name or URL base."""

    def __init__(self) -> None:
        self._types: dict[str, PostTypeDefinition] = {}
        self.register(BUILTIN_POST)

    def register(self, definition: PostTypeDefinition) -> None:
        self._types[definition.name] = definition
        logger.info("Post type registered: %s (/%s/)", definition.name, definition.url_base)

    def unregister(self, name: str) -> None:
        if name != BUILTIN_POST.name:
            self._types.pop(name, None)

    def get(self, name: str) -> PostTypeDefinition | None:
        return self._types.get(name)

    def get_by_url_base(self, url_base: str) -> PostTypeDefinition | None:
        """Return the public post type served under the given URL base."""
        for definition in self._types.values():
            if definition.public and definition.url_base == url_base:
                return definition
        return None

    def all_types(self) -> list[PostTypeDefinition]:
        return list(self._types.values())


post_type_registry = PostTypeRegistry()
