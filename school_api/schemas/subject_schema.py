from typing import Optional

from school_api.schemas.base_schema import ApiModel, RecordResponse


class SubjectBase(ApiModel):
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    credits: int = 0


class SubjectCreate(SubjectBase):
    pass


class SubjectUpdate(ApiModel):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    credits: Optional[int] = None


class SubjectResponse(RecordResponse, SubjectBase):
    pass
