"""
Featured Magician Service

Handles the settings-screen submission that changes which magician is
featured.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.constants.magicians import (
    FEATURED_ID_FIELD,
    FEATURED_MAGICIAN_OPTION,
    FEATURED_NONCE_ACTION,
    FEATURED_NONCE_FIELD,
)
from app.exceptions import RequestRejectedError
from app.utils.sanitize import absint

if TYPE_CHECKING:
    from app.services.option_service import OptionStore
    from app.utils.nonce import NonceManager

logger = logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    # Form semantics: missing, blank and "0" all count as empty
    return value is None or value == "" or value == "0" or value == 0


def save_featured_magician(
    form: Mapping[str, Any],
    *,
    user_id: int,
    options: OptionStore,
    nonces: NonceManager,
) -> int:
    """
    Validate the submission and store the featured magician id.

    The id is written as given (after coercion to a non-negative integer);
    whether it names a published magician is checked on every read instead.

    Raises:
        RequestRejectedError: nonce or id missing, or nonce invalid.  Nothing
            is written in that case.

    Returns:
        The id that was stored.
    """
    token = form.get(FEATURED_NONCE_FIELD)
    target = form.get(FEATURED_ID_FIELD)

    if _is_empty(token) or _is_empty(target) or not nonces.verify(token, FEATURED_NONCE_ACTION, user_id):
        logger.warning("Rejected featured magician update from user %s", user_id)
        raise RequestRejectedError(action=FEATURED_NONCE_ACTION)

    sanitized_id = absint(target)
    options.set(FEATURED_MAGICIAN_OPTION, sanitized_id)
    logger.info("Featured magician set to %s by user %s", sanitized_id, user_id)
    return sanitized_id
