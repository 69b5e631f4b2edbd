"""
Expense service: lifecycle of expenses and the category_name snapshot they carry.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database import to_naive_utc, utcnow
from ..models.expense import Expense, UNCATEGORIZED
from ..models.user import User
from ..schemas import ExpenseCreate, ExpenseUpdate
from .categories import resolve_category
from .ownership import get_owned_or_raise
from .stats import summarize_expenses


def list_expenses(user: User, db: Session, category_id: Optional[int] = None) -> List[Expense]:
    """Caller's expenses, newest first"""
    query = db.query(Expense).filter(Expense.user_id == user.id)
    if category_id is not None:
        query = query.filter(Expense.category_id == category_id)
    return query.order_by(Expense.date.desc(), Expense.id.desc()).all()


def create_expense(user: User, data: ExpenseCreate, db: Session) -> Expense:
    category_name = data.category_name
    if not category_name:
        ref = resolve_category(user, data.category, db)
        category_name = ref.label(UNCATEGORIZED)

    expense = Expense(
        user_id=user.id,
        title=data.title,
        amount=data.amount,
        category_id=data.category,
        category_name=category_name,
        description=data.description,
        date=to_naive_utc(data.date) if data.date else utcnow()
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


def update_expense(user: User, expense_id: int, patch: ExpenseUpdate, db: Session) -> Expense:
    """
    Apply a partial update.

    A new category id re-snapshots category_name when it resolves; when it
    does not, the previous name (or an explicit categoryName in the patch) stays.
    """
    expense = get_owned_or_raise(Expense, expense_id, user, db, "Expense")

    # Update only provided fields; null never clears a required column
    update_data = patch.model_dump(exclude_unset=True, exclude_none=True)

    if "category" in update_data:
        ref = resolve_category(user, update_data["category"], db)
        if ref.is_resolved:
            update_data["category_name"] = ref.category.name
        update_data["category_id"] = update_data.pop("category")

    if "date" in update_data:
        update_data["date"] = to_naive_utc(update_data["date"])

    for field, value in update_data.items():
        setattr(expense, field, value)

    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(user: User, expense_id: int, db: Session) -> int:
    expense = get_owned_or_raise(Expense, expense_id, user, db, "Expense")
    db.delete(expense)
    db.commit()
    return expense_id


def expense_stats(user: User, db: Session) -> dict:
    expenses = db.query(Expense).filter(Expense.user_id == user.id).all()
    return summarize_expenses(expenses)
