"""
Form Nonces

Action-scoped, user-bound, expiring tokens that protect admin form
submissions against forgery.  Tokens are signed with the application
secret; the action name is used as the signing salt, so a token issued
for one form never validates for another.
"""

import logging

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from app.config import settings

logger = logging.getLogger(__name__)


class NonceManager:
    """Create and verify nonces for a given action and user."""

    def __init__(self, secret_key: str | None = None, max_age: int | None = None):
        self.secret_key = secret_key or settings.secret_key
        self.max_age = max_age if max_age is not None else settings.nonce_lifetime
        self.serializer = URLSafeTimedSerializer(self.secret_key)

    def create(self, action: str, user_id: int) -> str:
        """Issue a nonce for `action` on behalf of `user_id`."""
        return self.serializer.dumps({"uid": user_id}, salt=action)

    def verify(self, token: str, action: str, user_id: int) -> bool:
        """Return True if the token was issued for this action and user and has not expired."""
        if not token or not isinstance(token, str):
            return False
        try:
            data = self.serializer.loads(token, salt=action, max_age=self.max_age)
        except SignatureExpired:
            logger.info("Expired nonce for action %s", action)
            return False
        except BadSignature:
            return False
        return isinstance(data, dict) and data.get("uid") == user_id
