from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from typing import Optional
from pydantic import EmailStr
from ..database import get_db
from ..deps import get_current_user
from ..models.user import User
from ..schemas import LoginRequest, MessageResponse, PasswordUpdateRequest, RegisterRequest
from ..services import auth as auth_service
from ..services.mailer import Mailer, get_mailer

router = APIRouter()

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a user and seed their default categories"""
    user = auth_service.register_user(data.name, data.email, data.password, db)
    return auth_service.session_payload(user)

@router.post("/login")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate a user"""
    user = auth_service.authenticate(data.email, data.password, db)
    return auth_service.session_payload(user)

@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    """Get the caller's profile"""
    return auth_service.public_profile(user)

@router.put("/updatedetails")
def update_details(
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    email: Optional[EmailStr] = Form(None),
    photo: Optional[UploadFile] = File(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update name, mobile, email and profile photo (multipart form)"""
    photo_path = None
    if photo is not None and photo.filename:
        content = photo.file.read()
        photo_path = auth_service.store_profile_photo(user, photo.filename, photo.content_type, content)

    try:
        user = auth_service.update_profile(user, db, name=name, mobile=mobile, email=email, photo_path=photo_path)
    except Exception:
        if photo_path:
            auth_service.discard_profile_photo(photo_path)
        raise
    return auth_service.session_payload(user)

@router.post("/send-verification", response_model=MessageResponse)
def send_verification(
    user: User = Depends(get_current_user),
    mailer: Mailer = Depends(get_mailer),
    db: Session = Depends(get_db)
):
    """Email a one-time code for changing the password"""
    auth_service.request_password_reset_code(user, mailer, db)
    return {"message": "Verification code sent to email"}

@router.put("/updatepassword")
def update_password(
    data: PasswordUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change the password with a one-time code"""
    user = auth_service.confirm_password_reset(user, data.otp, data.new_password, db)
    return auth_service.session_payload(user)

@router.delete("/deleteaccount", response_model=MessageResponse)
def delete_account(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Delete the caller and all their categories, expenses and incomes"""
    auth_service.delete_account(user, db)
    return {"message": "Account deleted successfully"}
