"""Tests for signup, signin and the current-user endpoints."""

from fastapi.testclient import TestClient

from farmbooks.core.security import create_access_token
from farmbooks.main import app

client = TestClient(app)


def signup(email="manager@kaasifarms.com", password="s3cret-pass", name="Farm Manager"):
    return client.post("/api/auth/signup", json={"name": name, "email": email, "password": password})


def signin(email="manager@kaasifarms.com", password="s3cret-pass"):
    return client.post("/api/auth/signin", json={"email": email, "password": password})


class TestSignup:
    def test_creates_user_without_password(self):
        response = signup()

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "manager@kaasifarms.com"
        assert data["role"] == "user"
        assert "password" not in data
        assert "passwordHash" not in data

    def test_normalizes_email(self):
        response = signup(email="Manager@KaasiFarms.com")

        assert response.json()["data"]["email"] == "manager@kaasifarms.com"

    def test_duplicate_email(self):
        signup()

        response = signup(email="MANAGER@kaasifarms.com")

        assert response.status_code == 409
        assert response.json()["message"] == "Email already registered"

    def test_short_password(self):
        response = signup(password="short")

        assert response.status_code == 422


class TestSignin:
    def test_returns_token(self):
        signup()

        response = signin()

        assert response.status_code == 200
        token = response.json()["data"]["token"]
        profile = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
        assert profile.json()["data"]["name"] == "Farm Manager"

    def test_wrong_password(self):
        signup()

        response = signin(password="not-the-password")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_unknown_email(self):
        response = signin(email="nobody@kaasifarms.com")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"


class TestTokenGuard:
    def test_garbage_token(self):
        response = client.get("/api/user/profile", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    def test_deleted_user(self):
        token = create_access_token({"id": 4242, "email": "gone@kaasifarms.com", "role": "user"})

        response = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found - please login again"


class TestProfile:
    def test_update_trims_name(self, user, user_headers):
        response = client.patch("/api/user/profile", json={"name": "  Head Clerk  "}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Head Clerk"
        assert response.json()["data"]["email"] == user.email

    def test_blank_name_rejected(self, user_headers):
        response = client.patch("/api/user/profile", json={"name": "   "}, headers=user_headers)

        assert response.status_code == 400


class TestChangePassword:
    def test_wrong_old_password(self, user_headers):
        response = client.post(
            "/api/user/change-password",
            json={"oldPassword": "wrong-one", "newPassword": "brand-new-pass"},
            headers=user_headers,
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Current password is incorrect"

    def test_change_then_signin(self, user, user_headers):
        response = client.post(
            "/api/user/change-password",
            json={"oldPassword": "password123", "newPassword": "brand-new-pass"},
            headers=user_headers,
        )

        assert response.status_code == 200
        assert signin(email=user.email, password="password123").status_code == 401
        assert signin(email=user.email, password="brand-new-pass").status_code == 200
