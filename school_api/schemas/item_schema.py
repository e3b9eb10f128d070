from typing import Optional

from school_api.schemas.base_schema import ApiModel, RecordResponse


class ItemBase(ApiModel):
    name: str
    description: Optional[str] = None
    quantity: int = 0


class ItemCreate(ItemBase):
    pass


class ItemUpdate(ApiModel):
    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None


class ItemResponse(RecordResponse, ItemBase):
    pass
