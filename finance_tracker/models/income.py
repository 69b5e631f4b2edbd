from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from ..database import Base, utcnow

DEFAULT_INCOME_CATEGORY = "Income"

class Income(Base):
    __tablename__ = "incomes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    source = Column(String, nullable=False)  # e.g. Salary, Freelancing
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String, nullable=False, default=DEFAULT_INCOME_CATEGORY)  # free text label
    description = Column(String)
    date = Column(DateTime, nullable=False, default=utcnow, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
