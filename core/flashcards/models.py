"""
SQLAlchemy ORM Models for the flashcard database

Defines User and Character tables. Character rows carry the owning
user_id; every query in the data-access layer filters on it.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    Account for a learner. Passwords are stored as bcrypt hashes only.
    """
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<User({self.id}, {self.email})>"


class Character(Base):
    """
    A flashcard and its mastery counters.

    user_id is NULL for rows created before accounts existed ("orphans");
    migrate_orphaned_characters() assigns them to a user.
    """
    __tablename__ = 'characters'

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=True)

    # Card content
    chinese = Column(String(255), nullable=False)
    pinyin = Column(String(255), nullable=False)
    english = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False)

    # Mastery tracking
    score = Column(Integer, nullable=False, default=0)  # Never negative
    attempts = Column(Integer, nullable=False, default=0)
    correct_count = Column(Integer, nullable=False, default=0)  # <= attempts
    last_reviewed = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index('idx_characters_user_created', 'user_id', 'created_at'),
        Index('idx_characters_user_category', 'user_id', 'category'),
    )

    def __repr__(self):
        return f"<Character({self.id}, {self.chinese}, score={self.score})>"
