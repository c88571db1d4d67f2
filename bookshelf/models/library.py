import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, ForeignKey, DateTime, Uuid
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from bookshelf.db.base import Base


# =====================================================
# USERS
# =====================================================

class User(Base):
    __tablename__ = "users"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)  # lower-case
    password_hash = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    sessions = relationship(
        "UserSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    books = relationship(
        "Book",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True
    )


# =====================================================
# SESSIONS
# =====================================================

class UserSession(Base):
    __tablename__ = "sessions"

    # JWT "jti" claim
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="sessions")


# =====================================================
# BOOKS
# =====================================================

class Book(Base):
    __tablename__ = "books"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )

    # sahiplik oluşturulduktan sonra değişmez
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    genrer = Column(String(255), nullable=False)

    # insertion order for listings
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now()
    )

    owner = relationship("User", back_populates="books")
