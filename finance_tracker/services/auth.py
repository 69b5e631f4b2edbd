"""
Auth service: registration, login, profile updates, password reset codes
and account deletion.
"""
import logging
import secrets
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..database import utcnow
from ..exceptions import AuthError, ConflictError, ServerError, ValidationError
from ..models.category import Category
from ..models.expense import Expense
from ..models.income import Income
from ..models.user import User
from ..security import (
    PASSWORD_POLICY_MESSAGE,
    create_access_token,
    hash_password,
    password_meets_policy,
    verify_password,
)
from .categories import seed_default_categories
from .mailer import Mailer, MailerError

logger = logging.getLogger(__name__)

ALLOWED_PHOTO_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def public_profile(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "mobile": user.mobile,
        "photo": user.photo,
    }


def session_payload(user: User) -> dict:
    """Public profile plus a freshly signed token"""
    payload = public_profile(user)
    payload["token"] = create_access_token(user.id)
    return payload


def normalize_email(email: str) -> str:
    """Emails are stored and looked up lowercased"""
    return email.strip().lower()


def check_password_policy(password: str) -> None:
    if not password_meets_policy(password):
        raise ValidationError(PASSWORD_POLICY_MESSAGE)


def register_user(name: str, email: str, password: str, db: Session) -> User:
    """
    Create a user together with the six default categories.

    Both go out in one commit, so a user never exists without its defaults.
    """
    if not name or not email or not password:
        raise ValidationError("Please add all fields")
    check_password_policy(password)
    email = normalize_email(email)

    if db.query(User).filter(User.email == email).first():
        raise ConflictError("User already exists")

    user = User(name=name, email=email, password=hash_password(password))
    db.add(user)
    db.flush()  # assigns user.id for the category rows
    seed_default_categories(user, db)
    db.commit()
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate(email: str, password: str, db: Session) -> User:
    email = normalize_email(email)
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login for %s", email)
        raise AuthError("Invalid credentials")
    return user


def store_profile_photo(user: User, filename: str, content_type: str, content: bytes) -> str:
    """Write an uploaded photo to the uploads directory and return its relative path"""
    extension = ALLOWED_PHOTO_TYPES.get(content_type)
    if extension is None:
        raise ValidationError("Images only")

    timestamp = utcnow().strftime("%Y%m%d%H%M%S%f")
    stored_filename = f"photo-{user.id}-{timestamp}{extension}"

    settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
    try:
        (settings.UPLOADS_DIR / stored_filename).write_bytes(content)
    except OSError as e:
        raise ServerError(f"Failed to save file {filename}: {e}") from e

    return f"uploads/{stored_filename}"


def discard_profile_photo(photo_path: str) -> None:
    """Remove a stored photo that no profile ended up pointing to"""
    (settings.UPLOADS_DIR / Path(photo_path).name).unlink(missing_ok=True)


def update_profile(
    user: User,
    db: Session,
    name: Optional[str] = None,
    mobile: Optional[str] = None,
    email: Optional[str] = None,
    photo_path: Optional[str] = None
) -> User:
    if name:
        user.name = name
    if mobile is not None:
        user.mobile = mobile

    email = normalize_email(email) if email else None
    if email and email != user.email:
        taken = db.query(User).filter(User.email == email, User.id != user.id).first()
        if taken:
            raise ConflictError("Email already in use")
        user.email = email

    if photo_path:
        user.photo = photo_path

    db.commit()
    db.refresh(user)
    return user


def generate_otp() -> str:
    """Six digit numeric code"""
    return str(secrets.randbelow(900000) + 100000)


def request_password_reset_code(user: User, mailer: Mailer, db: Session) -> None:
    """
    Store a fresh one-time code on the user and email it.

    If the email cannot be sent the code is cleared again, so a retry
    starts from a clean state.
    """
    otp = generate_otp()
    user.otp = otp
    user.otp_expire = utcnow() + timedelta(minutes=settings.OTP_EXPIRE_MINUTES)
    db.commit()

    message = (
        f"Your verification code is: {otp}\n\n"
        f"This code expires in {settings.OTP_EXPIRE_MINUTES} minutes."
    )
    try:
        mailer.send(user.email, "Password Change Verification Code", message)
    except MailerError as e:
        logger.error("Could not send verification code to user %s: %s", user.id, e)
        user.otp = None
        user.otp_expire = None
        db.commit()
        raise ServerError("Email could not be sent") from e


def confirm_password_reset(
    user: User,
    otp: str,
    new_password: str,
    db: Session,
    now: Optional[datetime] = None
) -> User:
    check_password_policy(new_password)

    now = now or utcnow()
    valid = (
        user.otp is not None
        and user.otp_expire is not None
        and secrets.compare_digest(user.otp.encode("utf-8"), (otp or "").encode("utf-8"))
        and now < user.otp_expire
    )
    if not valid:
        raise AuthError("Invalid or expired OTP")

    user.password = hash_password(new_password)
    user.otp = None
    user.otp_expire = None
    db.commit()
    db.refresh(user)
    return user


def delete_account(user: User, db: Session) -> None:
    """
    Remove the user and everything they own in a single transaction.

    Either all four deletes are committed or none are.
    """
    user_id = user.id
    try:
        db.query(Expense).filter(Expense.user_id == user_id).delete(synchronize_session=False)
        db.query(Income).filter(Income.user_id == user_id).delete(synchronize_session=False)
        db.query(Category).filter(Category.user_id == user_id).delete(synchronize_session=False)
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Account deletion failed for user %s", user_id)
        raise ServerError("Server Error") from e

    logger.info("Deleted account %s", user_id)
