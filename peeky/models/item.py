"""Item model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from peeky.database import Base
from peeky.models.mixins import TimestampMixin


class Item(Base, TimestampMixin):
    """Label/value pair (e.g. a shortcut and its keys) within a category."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    label = Column(String, nullable=False)
    value = Column(String, nullable=False, default="", server_default="")
    sort_order = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    category = relationship("Category", back_populates="items")
