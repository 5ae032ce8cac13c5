import os
import random
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import bson
import pytest

# Settings are read at import time, so required variables go in first
os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('MONGO_URI', 'mongodb://localhost:27017/test')
os.environ.setdefault('FLASK_ENV', 'testing')

from src.domain.models.db_models import Quiz, User  # noqa: E402
from src.domain.repositories import IQuizRepository, IUserRepository  # noqa: E402
from src.services.quiz_service import QuizService  # noqa: E402

ADMIN_ID = "admin-user-id"


class InMemoryQuizRepository(IQuizRepository):
    """Dict-backed quiz store with the same ordering rules as the Mongo one."""

    def __init__(self):
        self.rows = {}
        self.seq = 0

    def get_by_id(self, quiz_id):
        quiz = self.rows.get(quiz_id)
        return quiz.model_copy() if quiz else None

    def create(self, quiz):
        self.seq += 1
        quiz = quiz.model_copy(update={"id": self.seq})
        self.rows[quiz.id] = quiz
        return quiz.model_copy()

    def update(self, quiz):
        if quiz.id not in self.rows:
            return False
        self.rows[quiz.id] = self.rows[quiz.id].model_copy(update={
            "title": quiz.title,
            "description": quiz.description,
            "text": quiz.text,
            "notes": quiz.notes,
            "last_modified_date": quiz.last_modified_date,
        })
        return True

    def delete(self, quiz_id):
        return self.rows.pop(quiz_id, None) is not None

    def list_latest(self, limit):
        by_id = sorted(self.rows.values(), key=lambda q: q.id)
        return sorted(by_id, key=lambda q: q.created_date, reverse=True)[:limit]

    def list_by_title(self, limit):
        return sorted(self.rows.values(), key=lambda q: (q.title, q.id))[:limit]

    def list_all(self):
        return sorted(self.rows.values(), key=lambda q: q.id)


class BsonQuizRepository(InMemoryQuizRepository):
    """Stores rows as MongoDB would: encoded to BSON and read back, so dates keep milliseconds only."""

    @staticmethod
    def _through_bson(quiz):
        return Quiz(**bson.decode(bson.encode(quiz.to_dict())))

    def create(self, quiz):
        created = super().create(quiz)
        self.rows[created.id] = self._through_bson(created)
        return created

    def update(self, quiz):
        return super().update(self._through_bson(quiz))


class InMemoryUserRepository(IUserRepository):
    def __init__(self):
        self.users = {}

    def get_by_user_name(self, user_name):
        return next((u for u in self.users.values() if u.user_name == user_name), None)

    def create(self, user):
        self.users[user.id] = user


class FakeClock:
    """Returns a strictly increasing UTC time, one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def quiz_repo():
    return InMemoryQuizRepository()


@pytest.fixture
def bson_quiz_repo():
    return BsonQuizRepository()


@pytest.fixture
def user_repo():
    repo = InMemoryUserRepository()
    repo.create(User(_id=ADMIN_ID, user_name="Admin"))
    return repo


@pytest.fixture
def empty_user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def quiz_service(quiz_repo, clock):
    return QuizService(quiz_repo, clock=clock, rng=random.Random(1234))


@pytest.fixture(scope='module')
def app():
    """Create and configure a new app instance for each test module."""
    from app import create_app
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
    })
    yield app


@pytest.fixture
def client(app, quiz_service, user_repo):
    """A test client whose quiz routes run against the in-memory stores."""
    with patch('src.api.routes_quiz._get_quiz_service', return_value=quiz_service), \
         patch('src.api.routes_quiz._get_user_repository', return_value=user_repo):
        yield app.test_client()
