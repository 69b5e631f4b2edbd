"""
Income service. Income categories are free text labels, unrelated to the category table.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database import to_naive_utc, utcnow
from ..models.income import Income, DEFAULT_INCOME_CATEGORY
from ..models.user import User
from ..schemas import IncomeCreate, IncomeUpdate
from .ownership import get_owned_or_raise
from .stats import summarize_incomes


def list_incomes(user: User, db: Session, category: Optional[str] = None) -> List[Income]:
    """Caller's incomes, newest first"""
    query = db.query(Income).filter(Income.user_id == user.id)
    if category:
        query = query.filter(Income.category == category)
    return query.order_by(Income.date.desc(), Income.id.desc()).all()


def create_income(user: User, data: IncomeCreate, db: Session) -> Income:
    income = Income(
        user_id=user.id,
        source=data.source,
        amount=data.amount,
        category=data.category or DEFAULT_INCOME_CATEGORY,
        description=data.description,
        date=to_naive_utc(data.date) if data.date else utcnow()
    )
    db.add(income)
    db.commit()
    db.refresh(income)
    return income


def update_income(user: User, income_id: int, patch: IncomeUpdate, db: Session) -> Income:
    income = get_owned_or_raise(Income, income_id, user, db, "Income entry")

    update_data = patch.model_dump(exclude_unset=True, exclude_none=True)
    if "date" in update_data:
        update_data["date"] = to_naive_utc(update_data["date"])

    for field, value in update_data.items():
        setattr(income, field, value)

    db.commit()
    db.refresh(income)
    return income


def delete_income(user: User, income_id: int, db: Session) -> int:
    income = get_owned_or_raise(Income, income_id, user, db, "Income entry")
    db.delete(income)
    db.commit()
    return income_id


def income_stats(user: User, db: Session) -> dict:
    incomes = db.query(Income).filter(Income.user_id == user.id).all()
    return summarize_incomes(incomes)
