from sqlalchemy import Column, Integer, String, Text

from school_api.database import Base
from school_api.models.base_model import RecordMixin


class ItemModel(RecordMixin, Base):
    """Inventory item kept by the school."""

    __tablename__ = "items"

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False, default=0)
