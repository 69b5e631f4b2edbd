from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from typing import Optional
from ..database import get_db
from ..deps import get_current_user
from ..models.user import User
from ..schemas import ID_MAX, ID_MIN, IncomeCreate, IncomeUpdate, DeleteResponse
from ..services import incomes as income_service

router = APIRouter()

def serialize_income(income):
    return {
        "id": income.id,
        "user": income.user_id,
        "source": income.source,
        "amount": float(income.amount) if income.amount is not None else 0,
        "category": income.category,
        "description": income.description,
        "date": income.date.isoformat() if income.date else None,
        "createdAt": income.created_at.isoformat() if income.created_at else None,
        "updatedAt": income.updated_at.isoformat() if income.updated_at else None,
    }

@router.get("")
def get_incomes(
    category: Optional[str] = Query(None, max_length=100, description="Filter by category label"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the caller's incomes, newest first"""
    incomes = income_service.list_incomes(user, db, category=category)
    return [serialize_income(income) for income in incomes]

@router.get("/stats")
def get_income_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Total and count of the caller's incomes"""
    return income_service.income_stats(user, db)

@router.post("")
def create_income(
    data: IncomeCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an income entry"""
    return serialize_income(income_service.create_income(user, data, db))

@router.put("/{income_id}")
def update_income(
    income_data: IncomeUpdate,
    income_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an income entry"""
    return serialize_income(income_service.update_income(user, income_id, income_data, db))

@router.delete("/{income_id}", response_model=DeleteResponse)
def delete_income(
    income_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an income entry"""
    return {"id": income_service.delete_income(user, income_id, db)}
