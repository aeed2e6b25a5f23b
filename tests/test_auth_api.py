"""API tests for login and the bearer-token gate."""

import unittest
from datetime import timedelta
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from myflix.core.exceptions import ConfigurationError
from myflix.core.security import TokenService
from myflix.main import create_app
from myflix.models import User
from tests.support import ApiTestCase, make_settings


class TestLogin(ApiTestCase):
    """POST /login exchanges registered credentials for a token whose subject is the username."""

    def test_register_then_login(self) -> None:
        for username, password in [("johndoe123", "Secr3t!"), ("alice123", "x"), ("BOB12345", "päß wörd")]:
            with self.subTest(username=username):
                self.assertEqual(self.register(username, password).status_code, 201)
                res = self.login(username, password)
                self.assertEqual(res.status_code, 200)
                body = res.json()
                self.assertEqual(body["token_type"], "bearer")
                self.assertEqual(self.ctx.tokens.verify(body["access_token"]).sub, username)
                self.assertEqual(body["user"]["username"], username)
                self.assertNotIn("password", body["user"])
                self.assertNotIn("password_hash", body["user"])

    def test_wrong_password_always_fails(self) -> None:
        self.register("alice123", "Secr3t!")
        for wrong in ["Secr3t", "secr3t!", "Secr3t!!", "Secr3t! ", "completely-different"]:
            with self.subTest(wrong=wrong):
                res = self.login("alice123", wrong)
                self.assertEqual(res.status_code, 400)
                self.assertEqual(res.json()["error_code"], "INVALID_CREDENTIALS")

    def test_unknown_user_indistinguishable_from_wrong_password(self) -> None:
        self.register("alice123", "Secr3t!")
        unknown = self.login("nobody999", "Secr3t!")
        wrong = self.login("alice123", "nope")
        self.assertEqual(unknown.status_code, wrong.status_code)
        self.assertEqual(unknown.json(), wrong.json())

    def test_wrong_password_sharing_first_72_bytes_fails(self) -> None:
        base = "A" * 72
        self.assertEqual(self.register("alice123", base + "correct-tail").status_code, 201)
        res = self.login("alice123", base + "WRONG")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error_code"], "INVALID_CREDENTIALS")
        self.assertEqual(self.login("alice123", base + "correct-tail").status_code, 200)

    def test_unknown_user_still_costs_a_hash_check(self) -> None:
        with patch.object(self.ctx.hasher, "verify_dummy", wraps=self.ctx.hasher.verify_dummy) as dummy:
            res = self.login("nobody999", "Secr3t!")
        self.assertEqual(res.status_code, 400)
        dummy.assert_called_once_with("Secr3t!")

    def test_known_user_skips_dummy_check(self) -> None:
        self.register("alice123", "Secr3t!")
        with patch.object(self.ctx.hasher, "verify_dummy") as dummy:
            self.login("alice123", "wrong")
        dummy.assert_not_called()

    def test_missing_fields_is_validation_error(self) -> None:
        res = self.client.post("/login", json={"username": "alice123"})
        self.assertEqual(res.status_code, 422)
        self.assertEqual(res.json()["error_code"], "VALIDATION_ERROR")

    def test_malformed_stored_hash_is_generic_500(self) -> None:
        self.register("alice123", "Secr3t!")
        db = self.db()
        try:
            user = db.query(User).filter(User.username == "alice123").one()
            user.password_hash = "corrupted"
            db.commit()
        finally:
            db.close()
        res = self.login("alice123", "Secr3t!")
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["message"], "An internal error occurred.")
        self.assertNotIn("corrupted", res.text)

    def test_store_unavailable_is_generic_500(self) -> None:
        failure = OperationalError("SELECT", {}, Exception("connection refused to db-host:5432"))
        with patch("myflix.services.auth.find_user", side_effect=failure):
            res = self.login("alice123", "Secr3t!")
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["error_code"], "DEPENDENCY_ERROR")
        self.assertNotIn("db-host", res.text)


class TestAuthGate(ApiTestCase):
    """Protected routes reject requests without a valid, unexpired token for an existing user."""

    def test_valid_token_passes(self) -> None:
        token = self.token_for("alice123")
        res = self.client.get("/movies", headers=self.bearer(token))
        self.assertEqual(res.status_code, 200)

    def test_missing_token(self) -> None:
        res = self.client.get("/movies")
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.headers["WWW-Authenticate"], "Bearer")

    def test_wrong_scheme(self) -> None:
        token = self.token_for("alice123")
        res = self.client.get("/movies", headers={"Authorization": f"Basic {token}"})
        self.assertEqual(res.status_code, 401)

    def test_expired_token(self) -> None:
        self.register("alice123")
        token = self.ctx.tokens.issue("alice123", expires_in=timedelta(seconds=-1))
        res = self.client.get("/movies", headers=self.bearer(token))
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["error_code"], "NOT_AUTHENTICATED")

    def test_token_signed_with_other_secret(self) -> None:
        self.register("alice123")
        forged = TokenService("some-other-secret-0123456789abcdef").issue("alice123")
        res = self.client.get("/movies", headers=self.bearer(forged))
        self.assertEqual(res.status_code, 401)

    def test_corrupted_token(self) -> None:
        res = self.client.get("/movies", headers=self.bearer("not.a.jwt"))
        self.assertEqual(res.status_code, 401)

    def test_token_of_deleted_user_rejected(self) -> None:
        token = self.token_for("alice123")
        self.assertEqual(self.client.delete("/users/alice123", headers=self.bearer(token)).status_code, 200)
        res = self.client.get("/movies", headers=self.bearer(token))
        self.assertEqual(res.status_code, 401)


class TestStartup(unittest.TestCase):
    def test_logging_configured_by_factory(self) -> None:
        settings = make_settings(LOG_LEVEL="DEBUG")
        with patch("myflix.main.configure_logging") as configure:
            create_app(settings)
        configure.assert_called_once_with(settings)

    def test_missing_secret_fails_at_construction(self) -> None:
        with self.assertRaises(ConfigurationError):
            create_app(make_settings(JWT_SECRET=None))

    def test_api_prefix_mounts_routes(self) -> None:
        from fastapi.testclient import TestClient

        from myflix.models import Base

        app = create_app(make_settings(API_PREFIX="/api/v1"))
        Base.metadata.create_all(app.state.context.engine)
        with TestClient(app) as client:
            self.assertEqual(client.get("/api/v1/movies").status_code, 401)
            self.assertEqual(client.get("/movies").status_code, 404)
            self.assertEqual(client.get("/").status_code, 200)


if __name__ == "__main__":
    unittest.main()
