from fastapi import APIRouter

from school_api.api.endpoints import (
    health,
    items,
    students,
    subjects,
    teachers,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(items.router, prefix="/items", tags=["Items"])
api_router.include_router(students.router, prefix="/students", tags=["Students"])
api_router.include_router(subjects.router, prefix="/subjects", tags=["Subjects"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(teachers.router, prefix="/teachers", tags=["Teachers"])
