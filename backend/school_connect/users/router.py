import logging

from fastapi import APIRouter, Depends, HTTPException

from school_connect.auth.dependencies import get_current_user, ensure_self, ensure_self_or_admin
from school_connect.auth.schemas import UserResponse
from school_connect.auth.service import get_user_by_email, get_user_by_id
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.schemas import MessageResponse
from school_connect.security import hash_password, verify_password
from school_connect.users.schemas import ProfileUpdate, ProfileUpdateResponse, PasswordChange

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["users"],
)

MIN_PASSWORD_LENGTH = 6


@router.get("/user", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)):
    """Fetch the details of the currently authenticated user."""
    return current_user


@router.put("/users/{user_id}", response_model=ProfileUpdateResponse)
async def update_user(
    user_id: int,
    update: ProfileUpdate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update name, email or profile picture. The password is never touched here."""
    ensure_self_or_admin(current_user, user_id, "Forbidden: not authorized to update this profile")

    try:
        user = get_user_by_id(db, user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")

        if update.email and update.email != user.email:
            if get_user_by_email(db, update.email) is not None:
                raise HTTPException(status_code=400, detail="Email already registered")
            user.email = update.email
        if update.name:
            user.name = update.name
        if "profile_picture" in update.model_fields_set:
            user.profile_picture = update.profile_picture

        logger.info(f"Profile updated for user {user.id}")
        return {"message": "Profile updated successfully", "user": user}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating profile")


@router.put("/users/{user_id}/password", response_model=MessageResponse)
async def change_password(
    user_id: int,
    payload: PasswordChange,
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to change this password")

    if not payload.current_password or not payload.new_password:
        raise HTTPException(status_code=400, detail="Current and new password are required")
    if len(payload.new_password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"New password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    try:
        if not verify_password(payload.current_password, current_user.password):
            raise HTTPException(status_code=400, detail="Current password is incorrect")

        current_user.password = hash_password(payload.new_password)
        logger.info(f"Password changed for user {current_user.id}")
        return {"message": "Password changed successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error changing password for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error changing password")
