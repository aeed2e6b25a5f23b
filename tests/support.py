"""Shared helpers for API tests: an app on a fresh in-memory SQLite database."""

import unittest

from fastapi.testclient import TestClient
from httpx import Response

from myflix.core.config import Settings
from myflix.main import create_app
from myflix.models import Base
from myflix.scripts.seed_movies import seed_movies

TEST_SECRET = "test-signing-secret-0123456789abcdef"


def make_settings(**overrides: object) -> Settings:
    """Settings isolated from .env; low bcrypt cost keeps tests fast."""
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "BCRYPT_ROUNDS": 4,
        "API_PREFIX": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    """Builds the app per test; every test gets an empty database."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.app = create_app(self.settings)
        self.ctx = self.app.state.context
        Base.metadata.create_all(self.ctx.engine)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self.ctx.engine.dispose()

    def db(self):
        return self.ctx.session_factory()

    def seed(self) -> None:
        db = self.db()
        try:
            seed_movies(db)
        finally:
            db.close()

    def register(self, username: str, password: str = "Secr3t!", email: str | None = None) -> Response:
        return self.client.post(
            "/users",
            json={"username": username, "password": password, "email": email or f"{username}@myflix.io"},
        )

    def login(self, username: str, password: str = "Secr3t!") -> Response:
        return self.client.post("/login", json={"username": username, "password": password})

    def token_for(self, username: str, password: str = "Secr3t!") -> str:
        self.assertEqual(self.register(username, password).status_code, 201)
        res = self.login(username, password)
        self.assertEqual(res.status_code, 200)
        return res.json()["access_token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
