from school_api.api.resource import ResourceRoutes, build_resource_router
from school_api.repositories.item_repository import ItemRepository
from school_api.schemas.item_schema import ItemCreate, ItemResponse, ItemUpdate

router = build_resource_router(
    ResourceRoutes(
        repository=ItemRepository,
        create_schema=ItemCreate,
        update_schema=ItemUpdate,
        response_schema=ItemResponse,
    )
)
