from sqlalchemy import Column, Integer, String

from school_api.database import Base
from school_api.models.base_model import RecordMixin


class TeacherModel(RecordMixin, Base):
    """Teacher record. ``subject`` is a free-text label, not a foreign key."""

    __tablename__ = "teachers"

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    age = Column(Integer, nullable=False, default=0)
    subject = Column(String(100), nullable=True)
