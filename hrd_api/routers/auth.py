"""
Authentication router
"""
import logging
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.user import UserLogin, LoginResponse, UserEnvelope, UserResponse
from hrd_api.services.auth import authenticate_user, create_access_token, get_current_user
from hrd_api.config import settings
from hrd_api.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Login endpoint

    Returns the user (without password) and a JWT access token
    """
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.info(f"Failed login attempt for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.username, "role": user.role},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes)
    )

    return LoginResponse(
        data=UserResponse.model_validate(user),
        access_token=access_token,
    )


@router.get("/me", response_model=UserEnvelope)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """
    Get current user information
    """
    return UserEnvelope(data=UserResponse.model_validate(current_user))
