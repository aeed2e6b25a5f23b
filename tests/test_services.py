"""Service-level tests: deadlines, concurrent registration races and missing records."""

import time
import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from myflix.core.database import StoreSession
from myflix.core.deadline import Deadline
from myflix.core.exceptions import ConflictError, DependencyError, NotFoundError
from myflix.core.security import PasswordHasher
from myflix.models import Base, Movie, User
from myflix.schemas.users import UserCreate
from myflix.services import movies as movie_service
from myflix.services import users as user_service


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()
        self.store = StoreSession(db=self.db, deadline=Deadline(30.0))
        self.hasher = PasswordHasher(rounds=4)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class TestDeadline(StoreTestCase):
    def test_fresh_deadline_allows_calls(self) -> None:
        self.assertFalse(self.store.deadline.expired())
        self.assertGreater(self.store.deadline.remaining(), 0)
        self.assertEqual(movie_service.list_movies(self.store), [])

    def test_spent_deadline_stops_store_calls(self) -> None:
        deadline = Deadline(1.0)
        deadline._expires_at = time.monotonic() - 1
        store = StoreSession(db=self.db, deadline=deadline)
        self.assertEqual(deadline.remaining(), 0.0)
        with self.assertRaises(DependencyError):
            movie_service.list_movies(store)
        with self.assertRaises(DependencyError):
            user_service.register_user(
                store, self.hasher, UserCreate(username="alice123", password="p", email="a@myflix.io")
            )


class TestRegistrationRace(StoreTestCase):
    def test_losing_insert_becomes_conflict(self) -> None:
        body = UserCreate(username="alice123", password="first", email="a@myflix.io")
        user_service.register_user(self.store, self.hasher, body)
        # Simulate a second writer whose existence check ran before the first commit.
        with patch("myflix.services.users.find_user", return_value=None):
            with self.assertRaises(ConflictError):
                user_service.register_user(
                    self.store,
                    self.hasher,
                    UserCreate(username="alice123", password="second", email="b@myflix.io"),
                )
        users = self.db.query(User).filter(User.username == "alice123").all()
        self.assertEqual(len(users), 1)
        self.assertEqual(users[0].email, "a@myflix.io")
        self.assertTrue(self.hasher.verify("first", users[0].password_hash))


class TestMissingRecords(StoreTestCase):
    def test_unknown_user(self) -> None:
        with self.assertRaises(NotFoundError):
            user_service.delete_user(self.store, "ghost123")
        with self.assertRaises(NotFoundError):
            user_service.get_user(self.store, "ghost123")

    def test_unknown_movie(self) -> None:
        with self.assertRaises(NotFoundError):
            movie_service.get_movie_by_title(self.store, "Nope")

    def test_non_document_genre_values_are_skipped(self) -> None:
        self.db.add(Movie(title="Legacy", description="Old row", genre="Drama", director=["x"]))
        self.db.add(
            Movie(
                title="Heat",
                description="A heist",
                genre={"name": "Drama", "description": "Serious stories."},
                director={"name": "Michael Mann", "bio": "American director."},
            )
        )
        self.db.commit()
        self.assertEqual(movie_service.get_genre(self.store, "Drama").description, "Serious stories.")
        self.assertEqual(movie_service.get_director(self.store, "Michael Mann").name, "Michael Mann")
        with self.assertRaises(NotFoundError):
            movie_service.get_genre(self.store, "Western")


if __name__ == "__main__":
    unittest.main()
