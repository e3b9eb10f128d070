"""
Route factory shared by every CRUD resource.
"""

from dataclasses import dataclass
from typing import Annotated, Callable

from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from school_api.database import get_db
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.base_schema import MessageResponse


@dataclass(frozen=True)
class ResourceRoutes:
    """Everything needed to expose a repository over HTTP."""

    repository: type[ResourceRepository]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    key_type: type = int
    key_description: str = "Record ID"


def repository_provider(repository_cls: type[ResourceRepository]) -> Callable:
    """Build a dependency that hands each request a repository on its own session."""

    async def provide_repository(db: AsyncSession = Depends(get_db)):
        return repository_cls(db)

    return provide_repository


def build_resource_router(resource: ResourceRoutes) -> APIRouter:
    """Create the list, create, get, update and delete routes for a resource."""
    router = APIRouter()

    name = resource.repository.resource_name
    create_schema = resource.create_schema
    update_schema = resource.update_schema
    response_schema = resource.response_schema
    Key = Annotated[resource.key_type, Path(description=resource.key_description)]
    Repository = Annotated[
        ResourceRepository, Depends(repository_provider(resource.repository))
    ]

    @router.get("", response_model=list[response_schema], summary=f"List {name}s")
    async def list_records(repository: Repository):
        return await repository.get_all()

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {name}",
    )
    async def create_record(payload: create_schema, repository: Repository):
        return await repository.create(payload)

    @router.get("/{key}", response_model=response_schema, summary=f"Get {name}")
    async def get_record(key: Key, repository: Repository):
        return await repository.get(key)

    @router.put("/{key}", response_model=response_schema, summary=f"Update {name}")
    async def update_record(key: Key, payload: update_schema, repository: Repository):
        return await repository.update(key, payload)

    @router.delete("/{key}", response_model=MessageResponse, summary=f"Delete {name}")
    async def delete_record(key: Key, repository: Repository):
        await repository.delete(key)
        return MessageResponse(message=f"{name} deleted successfully")

    return router
