from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String
from app.database import Base, UTCDateTime

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt hash, never serialized
    password = Column(String, nullable=False)
    role = Column(String(10), nullable=False, default=ROLE_USER)
    created_at = Column(UTCDateTime, nullable=False, default=lambda: datetime.now(UTC))
