"""Generic repository implementing list/create/get/update/delete for a model.

Each entity gets a subclass that names its model; everything else is shared.
Records are never removed from the table: delete moves them to
``RecordStatus.DELETED`` and every read filters them out.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

import structlog
from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_api.database import Base
from school_api.exceptions import NotFoundError
from school_api.models.base_model import RecordStatus
from school_api.utils.error_handling import handle_database_errors

logger = structlog.get_logger()

# Largest value an INTEGER id column holds on every supported database
MAX_RECORD_ID = 2**31 - 1

ModelT = TypeVar("ModelT", bound=Base)
CreateSchemaT = TypeVar("CreateSchemaT", bound=BaseModel)
UpdateSchemaT = TypeVar("UpdateSchemaT", bound=BaseModel)


class ResourceRepository(Generic[ModelT, CreateSchemaT, UpdateSchemaT]):
    """CRUD operations for one model, bound to a single database session.

    Subclasses set ``model`` and ``resource_name`` and may override
    ``key_column`` when records are looked up by something other than id.
    """

    model: type[ModelT]
    resource_name: str = "Resource"

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def key_column(self):
        return self.model.id

    def _normalize_key(self, key: Any) -> Any:
        """Bring a lookup key into the form it is stored in."""
        return key

    def _key_in_range(self, key: Any) -> bool:
        if isinstance(key, int):
            return 1 <= key <= MAX_RECORD_ID
        return True

    def _active(self) -> Select:
        return select(self.model).filter(self.model.status == RecordStatus.ACTIVE)

    async def _values_for_create(self, data: CreateSchemaT) -> dict[str, Any]:
        return data.model_dump()

    async def _values_for_update(
        self, record: ModelT, data: UpdateSchemaT
    ) -> dict[str, Any]:
        return data.model_dump(exclude_unset=True)

    @handle_database_errors("list records")
    async def get_all(self) -> list[ModelT]:
        """Get every active record ordered by id."""
        result = await self.db.execute(self._active().order_by(self.model.id))
        return list(result.scalars().all())

    @handle_database_errors("create record")
    async def create(self, data: CreateSchemaT) -> ModelT:
        """Insert a new record.

        Returns:
            The created record with id and timestamps populated
        """
        record = self.model(**await self._values_for_create(data))
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)

        logger.info("Record created", resource=self.resource_name, record_id=record.id)
        return record

    @handle_database_errors("get record")
    async def get(self, key: Any) -> ModelT:
        """Get an active record by key.

        Raises:
            NotFoundError: If no active record has this key
        """
        key = self._normalize_key(key)
        record = None
        # ids outside the column range cannot exist and would fail in the driver
        if self._key_in_range(key):
            result = await self.db.execute(
                self._active().filter(self.key_column == key)
            )
            record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundError(
                f"{self.resource_name} not found", resource_type=self.resource_name
            )
        return record

    @handle_database_errors("update record")
    async def update(self, key: Any, data: UpdateSchemaT) -> ModelT:
        """Overwrite the fields present in ``data``; other fields are left alone.

        Raises:
            NotFoundError: If no active record has this key
        """
        record = await self.get(key)
        values = await self._values_for_update(record, data)
        for field, value in values.items():
            setattr(record, field, value)

        await self.db.commit()
        await self.db.refresh(record)

        logger.info(
            "Record updated",
            resource=self.resource_name,
            record_id=record.id,
            fields=sorted(values),
        )
        return record

    @handle_database_errors("delete record")
    async def delete(self, key: Any) -> ModelT:
        """Soft delete a record.

        Raises:
            NotFoundError: If no active record has this key, including one
                that was already deleted
        """
        record = await self.get(key)
        record.status = RecordStatus.DELETED
        record.deleted_at = datetime.now()
        await self.db.commit()
        await self.db.refresh(record)

        logger.info("Record deleted", resource=self.resource_name, record_id=record.id)
        return record
