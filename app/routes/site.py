"""
Public Site Routes

GET /{url_base}/{slug}/  → single page for a published post of a public type
                           (e.g. /alliance-approved-magician/the-amazing-gob/)
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from app.config import settings
from app.constants.magicians import MAGICIAN_POST_TYPE, MAGICIAN_SINGLE_TEMPLATE
from app.dependencies import get_magician_selector, get_post_repository
from app.exceptions import PostNotFoundError
from app.models.post import PostStatus
from app.plugins.hooks import HOOK_MAGICIAN_AFTER_OUTPUT, HOOK_MAGICIAN_BEFORE_OUTPUT
from app.plugins.registry import plugin_registry
from app.services.magician_service import MagicianSelector
from app.services.post_service import PostRepository, get_permalink, get_thumbnail_markup
from app.services.post_type_service import post_type_registry
from app.services.theme_service import THEME_NAME, get_single_template, render_content
from app.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Site"])

FALLBACK_TEMPLATE = f"{THEME_NAME}/index.html"


async def _collect_output(hook_name: str, payload: dict) -> Markup:
    """Fire an output action and join whatever markup its subscribers return."""
    results = await plugin_registry.fire_hook(hook_name, payload)
    return Markup("".join(str(result) for result in results if result))


@router.get("/{url_base}/{slug}/", response_class=HTMLResponse)
async def single_post(
    request: Request,
    url_base: str,
    slug: str,
    posts: PostRepository = Depends(get_post_repository),
    selector: MagicianSelector = Depends(get_magician_selector),
):
    """Render a single published post through the resolved template."""
    definition = post_type_registry.get_by_url_base(url_base)
    if definition is None:
        raise PostNotFoundError(slug)

    post = await posts.get_by_slug(definition.name, slug)
    if post is None or post.status != PostStatus.PUBLISHED:
        raise PostNotFoundError(slug)

    template = await get_single_template(post) or FALLBACK_TEMPLATE
    render_context = {"selector": selector, "post": post}
    fire_output_actions = post.post_type == MAGICIAN_POST_TYPE and template == MAGICIAN_SINGLE_TEMPLATE

    before_output = after_output = Markup("")
    if fire_output_actions:
        before_output = await _collect_output(HOOK_MAGICIAN_BEFORE_OUTPUT, {"post_id": post.id})
    content = Markup(await render_content(post.body, render_context))
    if fire_output_actions:
        after_output = await _collect_output(HOOK_MAGICIAN_AFTER_OUTPUT, {"post_id": post.id})

    return templates.TemplateResponse(
        request,
        template,
        {
            "site_name": settings.app_name,
            "post": post,
            "post_type": definition,
            "permalink": get_permalink(post),
            "thumbnail": Markup(get_thumbnail_markup(post, "medium")),
            "content": content,
            "before_output": before_output,
            "after_output": after_output,
        },
    )
