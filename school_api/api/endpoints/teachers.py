from school_api.api.resource import ResourceRoutes, build_resource_router
from school_api.repositories.teacher_repository import TeacherRepository
from school_api.schemas.teacher_schema import (
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
)

router = build_resource_router(
    ResourceRoutes(
        repository=TeacherRepository,
        create_schema=TeacherCreate,
        update_schema=TeacherUpdate,
        response_schema=TeacherResponse,
    )
)
