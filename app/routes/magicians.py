"""
Magician REST Routes

Read-only, public endpoints.  Each returns {"name", "url", "photo"} for a
published magician, or an empty object when there is none.

GET /magicians/v1/random          → random published magician
GET /magicians/v1/featured        → featured magician
GET /magicians/v1/{magician_id}   → magician by id
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_magician_selector
from app.services.magician_service import MagicianSelector, build_magician_response

router = APIRouter(tags=["Magicians"])
logger = logging.getLogger(__name__)


@router.get("/random")
async def random_magician(
    selector: MagicianSelector = Depends(get_magician_selector),
) -> dict[str, str]:
    """Return a random published magician."""
    return build_magician_response(await selector.resolve_random())


@router.get("/featured")
async def featured_magician(
    selector: MagicianSelector = Depends(get_magician_selector),
) -> dict[str, str]:
    """Return the featured magician, if it is still published."""
    return build_magician_response(await selector.resolve_featured())


@router.get("/{magician_id}")
async def get_magician(
    magician_id: int,
    selector: MagicianSelector = Depends(get_magician_selector),
) -> dict[str, str]:
    """Return a published magician by id."""
    return build_magician_response(await selector.resolve_by_id(magician_id))
