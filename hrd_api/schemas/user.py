"""
User schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


class UserResponse(BaseModel):
    """Schema for user response (never carries the password)"""
    id: int
    username: str
    email: Optional[str] = None
    role: str

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for login"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Schema for login response"""
    success: bool = True
    message: str = "Login successful"
    data: UserResponse
    access_token: str
    token_type: str = "bearer"


class UserEnvelope(BaseModel):
    success: bool = True
    data: UserResponse


class UsernameUpdate(BaseModel):
    """Schema for username change"""
    user_id: int = Field(..., alias="userId")
    new_username: str = Field(..., alias="newUsername", min_length=1, max_length=50)

    class Config:
        populate_by_name = True


class PasswordUpdate(BaseModel):
    """Schema for password change"""
    user_id: int = Field(..., alias="userId")
    old_password: str = Field(..., alias="oldPassword", min_length=1)
    new_password: str = Field(..., alias="newPassword", min_length=1)

    @field_validator("new_password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

    class Config:
        populate_by_name = True


class TokenData(BaseModel):
    """Schema for token data"""
    username: Optional[str] = None
    role: Optional[str] = None
