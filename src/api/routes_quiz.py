from __future__ import annotations

from typing import Optional

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from src.domain.errors import InvalidRequestError
from src.domain.models.api_models import QuizViewModel
from src.infrastructure.database import db
from src.infrastructure.repositories import MongoQuizRepository, MongoUserRepository
from src.services.author_service import resolve_author_id
from src.services.quiz_service import QuizService
from tm_utils.logger_utils import logger

quiz_bp = Blueprint('quiz', __name__)


def _get_quiz_service() -> QuizService:
    return QuizService(MongoQuizRepository(db))


def _get_user_repository() -> MongoUserRepository:
    return MongoUserRepository(db)


def _parse_quiz_payload() -> QuizViewModel:
    """Read the request body as a QuizViewModel; a missing or unusable body is an invalid request."""
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidRequestError("Quiz payload is missing")
    try:
        return QuizViewModel.model_validate(data)
    except ValidationError as e:
        logger.warning("Rejected quiz payload", extra={"errors": str(e), "route": request.path})
        raise InvalidRequestError("Quiz payload is invalid") from e


def _list_size(num: Optional[int]) -> int:
    return current_app.config['DEFAULT_LIST_SIZE'] if num is None else num


@quiz_bp.route('/<int:quiz_id>', methods=['GET'])
def get_quiz(quiz_id: int):
    """Retrieve the quiz with the given id."""
    return jsonify(_get_quiz_service().get(quiz_id).to_dict()), 200


@quiz_bp.route('', methods=['PUT'])
def create_quiz():
    """Add a new quiz. The author is resolved server-side."""
    model = _parse_quiz_payload()
    author_id = resolve_author_id(current_app.config['DEFAULT_AUTHOR_NAME'], _get_user_repository())
    created = _get_quiz_service().create(model, author_id)
    return jsonify(created.to_dict()), 200


@quiz_bp.route('', methods=['POST'])
def update_quiz():
    """Edit the quiz addressed by the payload's Id."""
    model = _parse_quiz_payload()
    updated = _get_quiz_service().update(model)
    return jsonify(updated.to_dict()), 200


@quiz_bp.route('/<int:quiz_id>', methods=['DELETE'])
def delete_quiz(quiz_id: int):
    _get_quiz_service().delete(quiz_id)
    return Response(status=200)


@quiz_bp.route('/Latest', methods=['GET'])
@quiz_bp.route('/Latest/<int:num>', methods=['GET'])
def latest(num: Optional[int] = None):
    """The `num` most recently created quizzes."""
    quizzes = _get_quiz_service().list_latest(_list_size(num))
    return jsonify([q.to_dict() for q in quizzes]), 200


@quiz_bp.route('/ByTitle', methods=['GET'])
@quiz_bp.route('/ByTitle/<int:num>', methods=['GET'])
def by_title(num: Optional[int] = None):
    """`num` quizzes sorted by title, A to Z."""
    quizzes = _get_quiz_service().list_by_title(_list_size(num))
    return jsonify([q.to_dict() for q in quizzes]), 200


@quiz_bp.route('/Random', methods=['GET'])
@quiz_bp.route('/Random/<int:num>', methods=['GET'])
def random_quizzes(num: Optional[int] = None):
    """`num` quizzes in random order."""
    quizzes = _get_quiz_service().list_random(_list_size(num))
    return jsonify([q.to_dict() for q in quizzes]), 200
