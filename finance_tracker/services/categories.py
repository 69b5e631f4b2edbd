"""
Category service: per-user categories, default seeding and category references.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import ValidationError
from ..models.category import (
    Category,
    DEFAULT_CATEGORIES,
    DEFAULT_COLOR,
    DEFAULT_ICON,
    KIND_CUSTOM,
    KIND_DEFAULT,
)
from ..models.user import User
from .ownership import get_owned_or_raise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRef:
    """
    Category id held by an expense.

    The id may not resolve (deleted category, or one owned by someone else);
    in that case `category` is None and callers must fall back explicitly.
    """
    category_id: Optional[int]
    category: Optional[Category] = None

    @property
    def is_resolved(self) -> bool:
        return self.category is not None

    def label(self, fallback: str) -> str:
        return self.category.name if self.is_resolved else fallback


def resolve_category(user: User, category_id: Optional[int], db: Session) -> CategoryRef:
    """Resolve a category id among the caller's own categories"""
    if category_id is None:
        return CategoryRef(category_id=None)
    category = db.query(Category).filter(
        Category.id == category_id,
        Category.user_id == user.id
    ).first()
    return CategoryRef(category_id=category_id, category=category)


def seed_default_categories(user: User, db: Session) -> List[Category]:
    """Add the default categories for a new user; the caller commits"""
    categories = [
        Category(user_id=user.id, kind=KIND_DEFAULT, **data)
        for data in DEFAULT_CATEGORIES
    ]
    db.add_all(categories)
    return categories


def list_categories(user: User, db: Session) -> List[Category]:
    return db.query(Category).filter(Category.user_id == user.id).order_by(Category.id).all()


def create_category(
    user: User,
    name: str,
    db: Session,
    icon: Optional[str] = None,
    color: Optional[str] = None
) -> Category:
    """Create a custom category for the caller"""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Please add a category name")

    category = Category(
        user_id=user.id,
        name=name,
        icon=icon or DEFAULT_ICON,
        color=color or DEFAULT_COLOR,
        kind=KIND_CUSTOM
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def delete_category(user: User, category_id: int, db: Session) -> int:
    """
    Delete one of the caller's categories.

    Expenses pointing at it are left alone: they keep their category_name
    snapshot and their category id simply stops resolving.
    """
    category = get_owned_or_raise(Category, category_id, user, db, "Category")
    db.delete(category)
    db.commit()
    logger.info("User %s deleted category %s", user.id, category_id)
    return category_id
