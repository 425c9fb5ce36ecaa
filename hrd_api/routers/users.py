"""
User account router
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.common import MessageResponse
from hrd_api.schemas.user import UsernameUpdate, PasswordUpdate
from hrd_api.services.auth import get_password_hash, verify_password
from hrd_api.models.user import User

router = APIRouter(prefix="/users", tags=["Users"])


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


def _ensure_username_available(db: Session, username: str):
    existing = db.query(User).filter(User.username == username).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )


@router.put("/update-username", response_model=MessageResponse)
def update_username(
    payload: UsernameUpdate,
    db: Session = Depends(get_db)
):
    """
    Change a user's username
    """
    user = _get_user_or_404(db, payload.user_id)

    if payload.new_username != user.username:
        _ensure_username_available(db, payload.new_username)

    user.username = payload.new_username
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    return MessageResponse(message="Username updated successfully")


@router.put("/update-password", response_model=MessageResponse)
def update_password(
    payload: PasswordUpdate,
    db: Session = Depends(get_db)
):
    """
    Change a user's password after checking the old one
    """
    user = _get_user_or_404(db, payload.user_id)

    if not verify_password(payload.old_password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect old password"
        )

    user.password_hash = get_password_hash(payload.new_password)
    db.commit()

    return MessageResponse(message="Password updated successfully")
