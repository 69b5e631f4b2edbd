from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ..database import get_db
from ..deps import get_current_user
from ..models.user import User
from ..services.dashboard import DEFAULT_RECENT_LIMIT, build_dashboard

router = APIRouter()

@router.get("")
def get_dashboard(
    limit: int = Query(DEFAULT_RECENT_LIMIT, ge=1, le=100, description="Number of recent transactions"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Totals, balance, recent transactions and daily trend for the caller"""
    return build_dashboard(user, db, limit=limit)
