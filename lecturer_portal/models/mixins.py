import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import declared_attr


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UuidPkMixin:
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)


class CreatedAtMixin:
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class TimestampMixin(CreatedAtMixin):
    # refreshed on every UPDATE issued through the ORM or Core
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class OwnedMixin:
    """Row owned by one lecturer; row security filters on ``__owner_column__``."""

    __owner_column__ = "lecturer_id"

    @declared_attr
    def lecturer_id(cls):
        return Column(
            Uuid,
            ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
