"""
Featured Magician Settings Screen

GET  /admin/featured-magician  → settings form (requires manage_magicians)
POST /admin/featured-magician  → save the featured magician, redirect back
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.auth import get_current_user, require_capability
from app.constants.magicians import (
    CAP_MANAGE_MAGICIANS,
    FEATURED_ID_FIELD,
    FEATURED_MAGICIAN_OPTION,
    FEATURED_NONCE_ACTION,
    FEATURED_NONCE_FIELD,
    SETTINGS_PAGE_PATH,
)
from app.dependencies import get_magician_selector, get_nonce_manager, get_option_store
from app.models.user import User
from app.services.featured_service import save_featured_magician
from app.services.magician_service import MagicianSelector
from app.services.option_service import OptionStore
from app.templating import templates
from app.utils.nonce import NonceManager
from app.utils.sanitize import absint

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])


@router.get(SETTINGS_PAGE_PATH, response_class=HTMLResponse)
async def featured_magician_page(
    request: Request,
    current_user: User = Depends(require_capability(CAP_MANAGE_MAGICIANS, message="Nice trick!")),
    selector: MagicianSelector = Depends(get_magician_selector),
    options: OptionStore = Depends(get_option_store),
    nonces: NonceManager = Depends(get_nonce_manager),
):
    """
    Render the featured magician settings screen.

    **Requires**: manage_magicians capability
    """
    return templates.TemplateResponse(
        request,
        "admin/featured_magician.html",
        {
            "have_magicians": await selector.have_magicians(),
            "magicians": await selector.list_magicians(),
            "selected": absint(options.get(FEATURED_MAGICIAN_OPTION, 0)),
            "saved": bool(request.query_params.get("saved")),
            "nonce": nonces.create(FEATURED_NONCE_ACTION, current_user.id),
            "nonce_field": FEATURED_NONCE_FIELD,
            "id_field": FEATURED_ID_FIELD,
            "action_url": SETTINGS_PAGE_PATH,
        },
    )


@router.post(SETTINGS_PAGE_PATH)
async def save_featured_magician_settings(
    request: Request,
    current_user: User = Depends(get_current_user),
    options: OptionStore = Depends(get_option_store),
    nonces: NonceManager = Depends(get_nonce_manager),
):
    """Save the featured magician and redirect back to the settings screen."""
    form = await request.form()
    save_featured_magician(form, user_id=current_user.id, options=options, nonces=nonces)
    return RedirectResponse(f"{SETTINGS_PAGE_PATH}?saved=1", status_code=status.HTTP_303_SEE_OTHER)
