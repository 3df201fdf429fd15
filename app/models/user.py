from sqlalchemy import Column, Integer, String
from app.database import Base
from app.constants.roles import DEFAULT_ROLE


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, index=True)
    email = Column(String, unique=True, nullable=False)
    role = Column(String(20), nullable=False, default=DEFAULT_ROLE.value)
