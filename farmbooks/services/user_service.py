"""Profile and password management for the signed-in user."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.core.security import hash_password, verify_password
from farmbooks.models.user import User
from farmbooks.schemas.users import ChangePasswordRequest, ProfileUpdate, UserResponse
from farmbooks.services.common import ServiceResponse

logger = logging.getLogger(__name__)


def get_profile(user: User) -> ServiceResponse:
    return ServiceResponse(200, "Profile retrieved", UserResponse.model_validate(user))


def update_profile(db: Session, user: User, data: ProfileUpdate) -> ServiceResponse:
    """Update editable profile fields. Email and role are not editable here."""
    changes = data.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is not None:
        name = changes["name"].strip()
        if not name:
            return ServiceResponse(400, "Name must not be empty")
        user.name = name

    try:
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating profile for user {user.id}: {str(e)}")
        return ServiceResponse(500, "Failed to update profile")

    return ServiceResponse(200, "Profile updated successfully", UserResponse.model_validate(user))


def change_password(db: Session, user: User, data: ChangePasswordRequest) -> ServiceResponse:
    """
    Replace the user's password after checking the current one.

    Returns:
        401 when the current password does not match, 200 otherwise
    """
    if not verify_password(data.old_password, user.password_hash):
        logger.warning(f"Rejected password change for user {user.id}: wrong current password")
        return ServiceResponse(401, "Current password is incorrect")

    try:
        user.password_hash = hash_password(data.new_password)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error changing password for user {user.id}: {str(e)}")
        return ServiceResponse(500, "Failed to change password")

    logger.info(f"Password changed for user {user.id}")
    return ServiceResponse(200, "Password changed successfully")
