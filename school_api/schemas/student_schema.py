from typing import Optional

from school_api.schemas.base_schema import ApiModel, RecordResponse


class StudentBase(ApiModel):
    first_name: str
    last_name: str
    age: int = 0
    grade: Optional[str] = None


class StudentCreate(StudentBase):
    pass


class StudentUpdate(ApiModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None


class StudentResponse(RecordResponse, StudentBase):
    pass
