from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from ..database import get_db
from ..deps import get_current_user
from ..models.user import User
from ..schemas import ID_MAX, ID_MIN, CategoryCreate, DeleteResponse
from ..services import categories as category_service

router = APIRouter()

def serialize_category(category):
    """Serialize a category; `type` is 'default' or 'custom'"""
    return {
        "id": category.id,
        "user": category.user_id,
        "name": category.name,
        "icon": category.icon,
        "color": category.color,
        "type": category.kind,
        "createdAt": category.created_at.isoformat() if category.created_at else None,
        "updatedAt": category.updated_at.isoformat() if category.updated_at else None,
    }

@router.get("")
def get_categories(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get the caller's categories"""
    return [serialize_category(c) for c in category_service.list_categories(user, db)]

@router.post("")
def create_category(
    data: CategoryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a custom category"""
    category = category_service.create_category(user, data.name, db, icon=data.icon, color=data.color)
    return serialize_category(category)

@router.delete("/{category_id}", response_model=DeleteResponse)
def delete_category(
    category_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a category; expenses that used it keep their category name"""
    deleted_id = category_service.delete_category(user, category_id, db)
    return {"id": deleted_id}
