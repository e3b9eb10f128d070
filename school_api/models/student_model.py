from sqlalchemy import Column, Integer, String

from school_api.database import Base
from school_api.models.base_model import RecordMixin


class StudentModel(RecordMixin, Base):
    __tablename__ = "students"

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    age = Column(Integer, nullable=False, default=0)
    grade = Column(String(20), nullable=True)
