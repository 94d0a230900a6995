"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from peeky.database import Base
from peeky.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """A named, ordered group of items."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    items = relationship(
        "Item",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Item.sort_order, Item.id]",
    )
