import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from .. import db, Base


class BaseModel(Base):
    """
    Abstract base for every entity table.

    Rows are never removed: deletion stamps `deleted_at` and queries filter on
    `deleted_at IS NULL`. Mutating helpers only change state; durability comes
    from an explicit repository save inside the unit of work.
    """
    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_as_deleted(self):
        """Soft delete: stamp the deletion time, keep the row."""
        self.deleted_at = datetime.now()
        return self

    def save(self, commit=False):
        """
        Add the instance to the session.

        Args:
            commit: If True, commit immediately. Otherwise flush so the row is
                visible to later queries in the same transaction.
        """
        db.session.add(self)
        if commit:
            try:
                db.session.commit()
            except Exception:
                db.session.rollback()
                raise
        else:
            db.session.flush()
        return self

    def __repr__(self):
        return f'<{self.__class__.__name__} id={self.id}>'
