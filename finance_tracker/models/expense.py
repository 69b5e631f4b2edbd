from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from ..database import Base, utcnow

UNCATEGORIZED = "Uncategorized"

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    # Plain integer, not a foreign key: survives deletion of the category
    category_id = Column(Integer, index=True)
    # Snapshot of the category name at write time, used for display and stats
    category_name = Column(String, nullable=False, default=UNCATEGORIZED)
    description = Column(String)
    date = Column(DateTime, nullable=False, default=utcnow, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
