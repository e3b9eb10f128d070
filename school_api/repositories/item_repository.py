from school_api.models.item_model import ItemModel
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.item_schema import ItemCreate, ItemUpdate


class ItemRepository(ResourceRepository[ItemModel, ItemCreate, ItemUpdate]):
    model = ItemModel
    resource_name = "Item"
