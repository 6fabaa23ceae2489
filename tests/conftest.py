"""Shared fixtures: in-memory SQLite database and authenticated headers."""

import os

# Settings are read once, so the environment must be in place before import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from farmbooks.core.security import create_access_token, hash_password
from farmbooks.db.dependencies import get_db
from farmbooks.domain.records.enums import UserRole
from farmbooks.main import app
from farmbooks.models import Base, User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def tables():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db() -> Session:
    """Provide database session for tests."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def make_user(db: Session, email: str, role: UserRole = UserRole.USER, password: str = "password123") -> User:
    user = User(
        name=email.split("@")[0].title(),
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    token = create_access_token({"id": user.id, "email": user.email, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db: Session) -> User:
    return make_user(db, "clerk@kaasifarms.com")


@pytest.fixture
def admin(db: Session) -> User:
    return make_user(db, "owner@kaasifarms.com", role=UserRole.ADMIN)


@pytest.fixture
def user_headers(user: User) -> dict:
    return auth_headers(user)


@pytest.fixture
def admin_headers(admin: User) -> dict:
    return auth_headers(admin)
