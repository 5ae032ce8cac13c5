from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable, List, Optional

from src.domain.errors import AuthorNotFoundError, InvalidRequestError, QuizNotFoundError
from src.domain.models.api_models import QuizViewModel
from src.domain.models.db_models import Quiz
from src.domain.repositories import IQuizRepository
from src.services.quiz_mapper import apply_editable_fields, to_view_model, to_view_model_array
from tm_utils.logger_utils import logger

DEFAULT_LIST_SIZE = 10

# Largest limit passed to the store; larger counts mean "every row"
_MAX_LIMIT = 2**31 - 1


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_store_precision(value: datetime) -> datetime:
    """Truncate to whole milliseconds, the resolution MongoDB keeps for dates."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


class QuizService:
    """
    Listing and lifecycle operations for quizzes.

    Holds no per-request state: the repository owns all durable state, and
    each mutation is a single insert, update or delete against it.

    :param quiz_repo: Store for Quiz rows.
    :param clock: Returns the current UTC time; injectable for tests.
    :param rng: Randomness source for `list_random`; pass a seeded
        `random.Random` for reproducible output.
    """

    def __init__(
        self,
        quiz_repo: IQuizRepository,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.quiz_repo = quiz_repo
        self.clock = clock or _utc_now
        self.rng = rng or random.Random()

    def _now(self) -> datetime:
        return _to_store_precision(self.clock())

    def _get_or_raise(self, quiz_id: int) -> Quiz:
        quiz = self.quiz_repo.get_by_id(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    def get(self, quiz_id: int) -> QuizViewModel:
        return to_view_model(self._get_or_raise(quiz_id))

    def create(self, model: Optional[QuizViewModel], author_id: str) -> QuizViewModel:
        """
        Insert a new quiz built from the editable fields of `model`.

        `author_id` is the already-resolved id of the creating user. Any Id,
        timestamps or author sent by the client are ignored.
        """
        if model is None:
            raise InvalidRequestError("Quiz payload is missing")
        if not model.title:
            raise InvalidRequestError("Quiz Title is required")
        if not author_id:
            raise AuthorNotFoundError(author_id)

        now = self._now()
        quiz = Quiz(
            title=model.title,
            description=model.description,
            text=model.text,
            notes=model.notes,
            created_date=now,
            last_modified_date=now,
            user_id=author_id,
        )
        quiz = self.quiz_repo.create(quiz)

        logger.info(
            "Created quiz",
            extra={"quiz_id": quiz.id, "user_id": author_id, "component": "quiz_service"},
        )
        return to_view_model(quiz)

    def update(self, model: Optional[QuizViewModel]) -> QuizViewModel:
        """
        Overwrite Title, Description, Text and Notes of the quiz `model.id`.

        The modification time is refreshed to now and never falls behind the
        creation time. Id, creation time and author stay as stored.
        """
        if model is None:
            raise InvalidRequestError("Quiz payload is missing")
        if model.id is None:
            raise InvalidRequestError("Quiz Id is required for an update")

        quiz = self._get_or_raise(model.id)
        if not model.title:
            raise InvalidRequestError("Quiz Title is required")

        quiz = apply_editable_fields(model, quiz)
        quiz.last_modified_date = max(self._now(), quiz.created_date)

        if not self.quiz_repo.update(quiz):
            # Deleted between the read and the write
            raise QuizNotFoundError(model.id)

        logger.info(
            "Updated quiz",
            extra={"quiz_id": quiz.id, "component": "quiz_service"},
        )
        return to_view_model(quiz)

    def delete(self, quiz_id: int) -> None:
        if not self.quiz_repo.delete(quiz_id):
            raise QuizNotFoundError(quiz_id)

        logger.info(
            "Deleted quiz",
            extra={"quiz_id": quiz_id, "component": "quiz_service"},
        )

    def list_latest(self, count: int = DEFAULT_LIST_SIZE) -> List[QuizViewModel]:
        if count <= 0:
            return []
        return to_view_model_array(self.quiz_repo.list_latest(min(count, _MAX_LIMIT)))

    def list_by_title(self, count: int = DEFAULT_LIST_SIZE) -> List[QuizViewModel]:
        if count <= 0:
            return []
        return to_view_model_array(self.quiz_repo.list_by_title(min(count, _MAX_LIMIT)))

    def list_random(self, count: int = DEFAULT_LIST_SIZE) -> List[QuizViewModel]:
        """Draw up to `count` quizzes, in random order, from the whole set."""
        if count <= 0:
            return []
        candidates = self.quiz_repo.list_all()
        picked = self.rng.sample(candidates, min(count, len(candidates)))
        return to_view_model_array(picked)
