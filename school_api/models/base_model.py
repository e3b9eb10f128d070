import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Integer


class RecordStatus(str, enum.Enum):
    """Lifecycle state of a stored record."""

    ACTIVE = "active"
    DELETED = "deleted"


class RecordMixin:
    """Identity, timestamps and soft-delete state shared by every model."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    status = Column(
        Enum(
            RecordStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=RecordStatus.ACTIVE,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )
    deleted_at = Column(DateTime, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.status == RecordStatus.DELETED
