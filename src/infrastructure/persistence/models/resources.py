"""Resource layer ORM models: sample_resources."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class SampleResource(Base):
    """Fixture resource: a generated 64-bit id and an optional ref."""

    __tablename__ = "sample_resources"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    ref: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
