from sqlalchemy import Column, Integer, String, Text

from school_api.database import Base
from school_api.models.base_model import RecordMixin


class SubjectModel(RecordMixin, Base):
    """Model representing academic subjects."""

    __tablename__ = "subjects"

    name = Column(String(100), nullable=False)
    code = Column(String(20), nullable=True)
    description = Column(Text, nullable=True)
    credits = Column(Integer, nullable=False, default=0)
