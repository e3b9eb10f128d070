from school_api.api.resource import ResourceRoutes, build_resource_router
from school_api.repositories.subject_repository import SubjectRepository
from school_api.schemas.subject_schema import (
    SubjectCreate,
    SubjectResponse,
    SubjectUpdate,
)

router = build_resource_router(
    ResourceRoutes(
        repository=SubjectRepository,
        create_schema=SubjectCreate,
        update_schema=SubjectUpdate,
        response_schema=SubjectResponse,
    )
)
