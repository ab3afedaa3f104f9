"""
SimpleForm Backend: Response SQLAlchemy Model
==============================================

What:  ORM model representing the `responses` table (one row per form submission).
How:   Inherits from `Base`; `Database.create_all()` creates the table on startup.
Who:   Used by `ResponseStore` for all CRUD operations.

Table Design:
    - UUID primary key generated on insert, never reassigned
    - name / email / feedback: NOT NULL text
    - rating: nullable integer, CHECK constrained to 1..5
    - created_at: UTC timestamp set on insert; updates never touch it

    Index on created_at:
        Listing returns rows in insertion order (created_at ascending).
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from simpleform.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResponseRecord(Base):
    """
    A persisted form submission.

    Lifecycle:
        1. Inserted by create (id and created_at assigned here)
        2. name/email/feedback/rating replaced as a whole by update
        3. Removed by delete; no soft-delete, no history
    """

    __tablename__ = "responses"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    feedback: Mapped[str] = mapped_column(Text, nullable=False)

    # NULL when the submitter gave no rating.
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name="ck_responses_rating_range",
        ),
        Index("idx_responses_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ResponseRecord(id={self.id}, name='{self.name}', rating={self.rating})>"
