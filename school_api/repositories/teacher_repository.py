from school_api.models.teacher_model import TeacherModel
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.teacher_schema import TeacherCreate, TeacherUpdate


class TeacherRepository(ResourceRepository[TeacherModel, TeacherCreate, TeacherUpdate]):
    model = TeacherModel
    resource_name = "Teacher"
