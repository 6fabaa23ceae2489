"""Signup and signin endpoints."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from farmbooks.api.responses import render
from farmbooks.db.dependencies import get_db
from farmbooks.schemas.common import ApiResponse
from farmbooks.schemas.users import SigninRequest, SignupRequest, TokenResponse, UserResponse
from farmbooks.services import auth_service

router = APIRouter()


@router.post("/signup", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, response: Response, db: Session = Depends(get_db)):
    """Create an account. The password is never echoed back."""
    return render(auth_service.signup(db, data), response)


@router.post("/signin", response_model=ApiResponse[TokenResponse])
def signin(data: SigninRequest, response: Response, db: Session = Depends(get_db)):
    return render(auth_service.signin(db, data), response)
