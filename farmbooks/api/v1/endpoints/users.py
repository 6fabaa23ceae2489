"""Current-user endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from farmbooks.api.deps import get_current_user
from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.models.user import User
from farmbooks.schemas.common import ApiResponse
from farmbooks.schemas.users import ChangePasswordRequest, ProfileUpdate, UserResponse
from farmbooks.services import user_service

router = APIRouter()


@router.get("/profile", response_model=ApiResponse[UserResponse])
def get_profile(response: Response, user: User = Depends(get_current_user)):
    return render(user_service.get_profile(user), response)


@router.patch("/profile", response_model=ApiResponse[UserResponse])
def update_profile(
    data: ProfileUpdate,
    response: Response,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return render(user_service.update_profile(db, user, data), response)


@router.post("/change-password", response_model=ApiResponse[None])
def change_password(
    data: ChangePasswordRequest,
    response: Response,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return render(user_service.change_password(db, user, data), response)
