"""
Lookup of user-owned records.
A missing id is reported as NotFoundError, a record of another user as AuthorizationError.
"""
from sqlalchemy.orm import Session

from ..exceptions import AuthorizationError, NotFoundError
from ..models.user import User


def get_owned_or_raise(model, record_id: int, user: User, db: Session, label: str):
    """Load a record by id and check it belongs to the caller"""
    record = db.query(model).filter(model.id == record_id).first()
    if record is None:
        raise NotFoundError(f"{label} not found")
    if record.user_id != user.id:
        raise AuthorizationError("User not authorized")
    return record
