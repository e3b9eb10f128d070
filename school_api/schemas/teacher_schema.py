from typing import Optional

from school_api.schemas.base_schema import ApiModel, RecordResponse


class TeacherBase(ApiModel):
    first_name: str
    last_name: str
    age: int = 0
    subject: Optional[str] = None


class TeacherCreate(TeacherBase):
    """Schema for creating a new teacher"""

    pass


class TeacherUpdate(ApiModel):
    """Schema for updating a teacher; only the fields sent are changed"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    subject: Optional[str] = None


class TeacherResponse(RecordResponse, TeacherBase):
    pass
