from .post import Post, PostStatus
from .user import User

__all__ = [
    "Post",
    "PostStatus",
    "User",
]
