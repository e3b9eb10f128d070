from school_api.api.resource import ResourceRoutes, build_resource_router
from school_api.repositories.student_repository import StudentRepository
from school_api.schemas.student_schema import (
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)

router = build_resource_router(
    ResourceRoutes(
        repository=StudentRepository,
        create_schema=StudentCreate,
        update_schema=StudentUpdate,
        response_schema=StudentResponse,
    )
)
