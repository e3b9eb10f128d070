from school_api.models.subject_model import SubjectModel
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.subject_schema import SubjectCreate, SubjectUpdate


class SubjectRepository(ResourceRepository[SubjectModel, SubjectCreate, SubjectUpdate]):
    model = SubjectModel
    resource_name = "Subject"
