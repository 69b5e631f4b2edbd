"""
Pydantic schemas for request validation.
Request bodies use the camelCase keys of the public API (categoryName, newPassword);
responses are built by the serialize_* helpers in the routers.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Range of a signed 64-bit INTEGER column; ids outside it can never match a row
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1


# =============================================================================
# Auth Schemas
# =============================================================================

class RegisterRequest(BaseModel):
    """Schema for registering a user"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=1, max_length=72)


class LoginRequest(BaseModel):
    """Schema for logging in"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PasswordUpdateRequest(BaseModel):
    """Schema for confirming a password reset with a one-time code"""
    model_config = ConfigDict(populate_by_name=True)

    otp: str = Field(..., min_length=1, max_length=6)
    new_password: str = Field(..., alias="newPassword", min_length=1, max_length=72)


# =============================================================================
# Category Schemas
# =============================================================================

class CategoryCreate(BaseModel):
    """Schema for creating a category"""
    name: str = Field("", max_length=100, description="Category name")
    icon: Optional[str] = Field(None, max_length=50, description="Icon identifier")
    color: Optional[str] = Field(None, max_length=7, pattern=r"^#[0-9A-Fa-f]{6}$", description="Hex color code")


# =============================================================================
# Expense Schemas
# =============================================================================

class ExpenseCreate(BaseModel):
    """Schema for creating an expense"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., allow_inf_nan=False)
    category: int = Field(..., ge=ID_MIN, le=ID_MAX, description="Category ID")
    category_name: Optional[str] = Field(None, alias="categoryName", max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = None


class ExpenseUpdate(BaseModel):
    """Schema for updating an expense - only supplied fields are applied"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = Field(None, allow_inf_nan=False)
    category: Optional[int] = Field(None, ge=ID_MIN, le=ID_MAX)
    category_name: Optional[str] = Field(None, alias="categoryName", min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = None
    # Explicitly NOT allowing: id, user, createdAt, updatedAt


# =============================================================================
# Income Schemas
# =============================================================================

class IncomeCreate(BaseModel):
    """Schema for creating an income entry"""
    source: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., allow_inf_nan=False)
    category: Optional[str] = Field(None, max_length=100, description="Free text label, defaults to 'Income'")
    description: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = None


class IncomeUpdate(BaseModel):
    """Schema for updating an income entry"""
    source: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = Field(None, allow_inf_nan=False)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = None


# =============================================================================
# Common Response Schemas
# =============================================================================

class MessageResponse(BaseModel):
    """Generic message response"""
    message: str


class DeleteResponse(BaseModel):
    """Response for delete operations"""
    id: int

