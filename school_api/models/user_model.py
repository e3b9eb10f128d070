from sqlalchemy import Column, String

from school_api.database import Base
from school_api.models.base_model import RecordMixin


class UserModel(RecordMixin, Base):
    """User model for storing user related details"""

    __tablename__ = "users"

    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
