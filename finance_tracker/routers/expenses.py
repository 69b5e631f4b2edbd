from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from typing import Optional
from ..database import get_db
from ..deps import get_current_user
from ..models.user import User
from ..schemas import ID_MAX, ID_MIN, ExpenseCreate, ExpenseUpdate, DeleteResponse
from ..services import expenses as expense_service

router = APIRouter()

def serialize_expense(expense):
    """Serialize an expense with its category reference and name snapshot"""
    return {
        "id": expense.id,
        "user": expense.user_id,
        "title": expense.title,
        "amount": float(expense.amount) if expense.amount is not None else 0,
        "category": expense.category_id,
        "categoryName": expense.category_name,
        "description": expense.description,
        "date": expense.date.isoformat() if expense.date else None,
        "createdAt": expense.created_at.isoformat() if expense.created_at else None,
        "updatedAt": expense.updated_at.isoformat() if expense.updated_at else None,
    }

@router.get("")
def get_expenses(
    category: Optional[int] = Query(None, ge=ID_MIN, le=ID_MAX, description="Filter by category ID"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the caller's expenses, newest first"""
    expenses = expense_service.list_expenses(user, db, category_id=category)
    return [serialize_expense(expense) for expense in expenses]

@router.get("/stats")
def get_expense_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Total, per-category sums and count of the caller's expenses"""
    return expense_service.expense_stats(user, db)

@router.post("")
def create_expense(
    data: ExpenseCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an expense"""
    return serialize_expense(expense_service.create_expense(user, data, db))

@router.put("/{expense_id}")
def update_expense(
    expense_data: ExpenseUpdate,
    expense_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an existing expense"""
    return serialize_expense(expense_service.update_expense(user, expense_id, expense_data, db))

@router.delete("/{expense_id}", response_model=DeleteResponse)
def delete_expense(
    expense_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense"""
    return {"id": expense_service.delete_expense(user, expense_id, db)}
