"""
Request-scoped service dependencies.

Routes obtain their collaborators through these functions so tests can
swap them with app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.services.magician_service import MagicianSelector
from app.services.option_service import OptionStore
from app.services.post_service import PostRepository
from app.utils.nonce import NonceManager


def get_option_store() -> OptionStore:
    return OptionStore(settings.options_file)


def get_nonce_manager() -> NonceManager:
    return NonceManager()


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_magician_selector(
    posts: PostRepository = Depends(get_post_repository),
    options: OptionStore = Depends(get_option_store),
) -> MagicianSelector:
    return MagicianSelector(posts, options)
