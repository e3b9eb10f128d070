from school_api.models.student_model import StudentModel
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.student_schema import StudentCreate, StudentUpdate


class StudentRepository(ResourceRepository[StudentModel, StudentCreate, StudentUpdate]):
    model = StudentModel
    resource_name = "Student"
