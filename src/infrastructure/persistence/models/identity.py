"""Identity layer ORM models: users, user_permissions."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database import Base


class User(Base):
    """Account row.

    login is indexed but deliberately not unique: duplicated logins are
    reported as "not found" by the user service rather than rejected here.
    password holds the hash, never the clear value.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    ref: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    login: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    permissions: Mapped[list["UserPermission"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="UserPermission.permission"
    )


class UserPermission(Base):
    """Permission granted to a user.  Composite PK: (user_id, permission)."""

    __tablename__ = "user_permissions"

    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    permission: Mapped[str] = mapped_column(Text, primary_key=True)

    user: Mapped["User"] = relationship(back_populates="permissions")
