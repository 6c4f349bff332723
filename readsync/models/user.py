"""User model: one account per KOReader username."""
from sqlalchemy import Column, Integer, String

from readsync.db.session import Base


class User(Base):
    __tablename__ = "users"

    # Explicit integer key: progress rows point at it, so it must survive VACUUM
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)  # base64 HMAC digest, never the plaintext
    salt = Column(String, nullable=False)
