from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class ApiModel(BaseModel):
    """Base schema: PascalCase JSON keys, snake_case names accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordResponse(ApiModel):
    """Fields every stored record exposes."""

    id: int = Field(..., alias="ID")
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
