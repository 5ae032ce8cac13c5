from typing import List, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database

from src.domain.repositories import IQuizRepository, IUserRepository
from src.domain.models.db_models import Quiz, User
from tm_utils.logger_utils import logger

# Fields rewritten by an update; everything else is fixed at insert
_MUTABLE_QUIZ_FIELDS = ("title", "description", "text", "notes", "last_modified_date")


class MongoQuizRepository(IQuizRepository):
    """MongoDB implementation of the quiz repository."""

    def __init__(self, db: Database):
        self.db = db
        self.collection = self.db.quizzes
        self.counters = self.db.counters

    def _next_id(self) -> int:
        """Atomically allocate the next integer quiz id."""
        counter = self.counters.find_one_and_update(
            {"_id": "quizzes"},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def _to_quizzes(self, cursor) -> List[Quiz]:
        return [Quiz(**doc) for doc in cursor]

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        doc = self.collection.find_one({"_id": quiz_id})
        if not doc:
            logger.warning(
                "MongoQuizRepository.get_by_id.missing",
                extra={"quiz_id": quiz_id},
            )
            return None

        try:
            return Quiz(**doc)
        except Exception as exc:
            logger.error(
                "MongoQuizRepository.get_by_id.parse_error",
                extra={"quiz_id": quiz_id, "error": str(exc)},
                exc_info=True,
            )
            raise

    def create(self, quiz: Quiz) -> Quiz:
        quiz = quiz.model_copy(update={"id": self._next_id()})
        self.collection.insert_one(quiz.to_dict())
        logger.info(f"Created quiz '{quiz.title}' with ID: {quiz.id}")
        return quiz

    def update(self, quiz: Quiz) -> bool:
        if quiz.id is None:
            raise ValueError("Quiz has no id for update().")

        doc = quiz.to_dict()
        set_doc = {field: doc[field] for field in _MUTABLE_QUIZ_FIELDS}
        result = self.collection.update_one({"_id": quiz.id}, {"$set": set_doc})

        if result.matched_count == 0:
            logger.warning(
                "MongoQuizRepository.update.not_found",
                extra={"quiz_id": quiz.id},
            )
            return False

        logger.info(
            "MongoQuizRepository.update.ok",
            extra={"quiz_id": quiz.id},
        )
        return True

    def delete(self, quiz_id: int) -> bool:
        result = self.collection.delete_one({"_id": quiz_id})
        if result.deleted_count == 0:
            logger.warning(
                "MongoQuizRepository.delete.not_found",
                extra={"quiz_id": quiz_id},
            )
            return False

        logger.info(f"Deleted quiz {quiz_id}")
        return True

    def list_latest(self, limit: int) -> List[Quiz]:
        cursor = (
            self.collection.find()
            .sort([("created_date", DESCENDING), ("_id", ASCENDING)])
            .limit(limit)
        )
        return self._to_quizzes(cursor)

    def list_by_title(self, limit: int) -> List[Quiz]:
        # Default collation compares strings by code point
        cursor = (
            self.collection.find()
            .sort([("title", ASCENDING), ("_id", ASCENDING)])
            .limit(limit)
        )
        return self._to_quizzes(cursor)

    def list_all(self) -> List[Quiz]:
        return self._to_quizzes(self.collection.find().sort("_id", ASCENDING))


class MongoUserRepository(IUserRepository):
    """MongoDB implementation of the user repository."""

    def __init__(self, db: Database):
        self.db = db
        self.collection = self.db.users

    def get_by_user_name(self, user_name: str) -> Optional[User]:
        doc = self.collection.find_one({"user_name": user_name})
        if not doc:
            logger.warning(
                "MongoUserRepository.get_by_user_name.missing",
                extra={"user_name": user_name},
            )
            return None
        return User(**doc)

    def create(self, user: User) -> None:
        self.collection.insert_one(user.to_dict())
        logger.info(f"Created user '{user.user_name}' with ID: {user.id}")
