from typing import Annotated

from fastapi import Depends

from school_api.api.resource import (
    ResourceRoutes,
    build_resource_router,
    repository_provider,
)
from school_api.repositories.user_repository import UserRepository
from school_api.schemas.user_schema import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)


router = build_resource_router(
    ResourceRoutes(
        repository=UserRepository,
        create_schema=UserCreate,
        update_schema=UserUpdate,
        response_schema=UserResponse,
        key_type=str,
        key_description="User email address",
    )
)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    repository: Annotated[UserRepository, Depends(repository_provider(UserRepository))],
):
    """
    Check an email and password against the stored users.
    """
    user = await repository.authenticate(credentials.email, credentials.password)
    return LoginResponse(
        message="Login successful", user=UserResponse.model_validate(user)
    )
