from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt, ExpiredSignatureError
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Callable, Optional
from app.models.user import User
from app.database import get_db
from app.exceptions import AuthenticationError, AuthorizationError, InvalidTokenError
from app.permissions_config.capabilities import user_can
from .constants import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, ACCESS_TOKEN_COOKIE
import logging

# Initialize logging
logger = logging.getLogger(__name__)


# Function to create an access token with an expiration time
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})

    if "sub" not in to_encode:
        raise ValueError("Missing 'sub' claim (email) in token data.")

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


# Function to decode an access token
def decode_access_token(token: str) -> str:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.info("Token expired")
        raise InvalidTokenError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {str(e)}")
        raise InvalidTokenError()

    email = payload.get("sub")
    if email is None:
        logger.warning("Token is missing 'sub' claim")
        raise InvalidTokenError("Token does not contain 'sub' field.")
    return email


def _token_from_request(request: Request) -> Optional[str]:
    """Bearer header first, then the access token cookie set for browser sessions."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    token = _token_from_request(request)
    if not token:
        raise AuthenticationError("Not authenticated")

    email = decode_access_token(token)

    result = await db.execute(select(User).where(User.email == email))
    user = result.scalars().first()
    if user is None:
        raise AuthenticationError("Could not validate credentials")

    return user


# Dependency factory requiring a capability on the current user
def require_capability(capability: str, message: Optional[str] = None) -> Callable[..., User]:
    async def _current_user_with_capability(
        current_user: User = Depends(get_current_user),
    ) -> User:
        if not await user_can(current_user, capability):
            logger.info("User %s lacks capability %s", current_user.id, capability)
            raise AuthorizationError(
                message=message or "You do not have permission to perform this action",
                required_capability=capability,
            )
        return current_user

    return _current_user_with_capability
