"""Signup and signin."""

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from farmbooks.core.security import create_access_token, hash_password, verify_password
from farmbooks.models.user import User
from farmbooks.schemas.users import SigninRequest, SignupRequest, TokenResponse, UserResponse
from farmbooks.services.common import ServiceResponse

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def signup(db: Session, data: SignupRequest) -> ServiceResponse:
    """
    Register a new user with the default role.

    Returns:
        201 with the created user, or 409 if the email is taken
    """
    email = normalize_email(data.email)

    if db.query(User).filter(User.email == email).first():
        logger.info("signup_rejected", email=email, reason="duplicate")
        return ServiceResponse(409, "Email already registered")

    user = User(
        name=data.name.strip(),
        email=email,
        password_hash=hash_password(data.password),
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.rollback()
        return ServiceResponse(409, "Email already registered")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("signup_failed", email=email, error=str(e))
        return ServiceResponse(500, "Failed to create user")

    logger.info("user_created", user_id=user.id, email=email)
    return ServiceResponse(201, "User created successfully", UserResponse.model_validate(user))


def signin(db: Session, data: SigninRequest) -> ServiceResponse:
    """
    Exchange email and password for an access token.

    Unknown emails and wrong passwords produce the same 401.
    """
    email = normalize_email(data.email)
    user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(data.password, user.password_hash):
        logger.info("signin_rejected", email=email)
        return ServiceResponse(401, INVALID_CREDENTIALS)

    token = create_access_token({"id": user.id, "email": user.email, "role": user.role.value})

    logger.info("signin_succeeded", user_id=user.id)
    return ServiceResponse(200, "Login successful", TokenResponse(token=token))
