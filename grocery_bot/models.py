from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    Index,
    func,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class GroceryListItem(Base):
    __tablename__ = "grocery_list_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    note = Column(Text, nullable=True)
    # Display position; new items go to the end
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_grocery_list_items_sort_order", "sort_order"),
    )
