from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, Index, UniqueConstraint
from app.database import Base
from datetime import datetime
import enum


class PostStatus(str, enum.Enum):
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    PUBLISHED = "published"


class Post(Base):
    """A typed document in the content store (posts, magicians, ...)."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    post_type = Column(String(20), nullable=False, default="post")
    status = Column(Enum(PostStatus), default=PostStatus.DRAFT, nullable=False)
    title = Column(String, nullable=False, default="")
    slug = Column(String, nullable=False, index=True)
    body = Column(Text, nullable=False, default="")
    thumbnail_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("post_type", "slug", name="unique_type_slug"),
        Index("idx_posts_type_status", "post_type", "status"),
    )

    def __repr__(self) -> str:
        return f"<Post id={self.id} type={self.post_type!r} status={self.status}>"
