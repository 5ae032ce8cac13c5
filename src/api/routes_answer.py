from flask import Blueprint, current_app, jsonify

from src.services.answer_service import get_sample_answers

answer_bp = Blueprint('answer', __name__)


@answer_bp.route('/All/<int:question_id>', methods=['GET'])
def all_answers(question_id: int):
    """Sample answers for a question; generated, not read from the database."""
    answers = get_sample_answers(question_id, count=current_app.config['SAMPLE_ANSWER_COUNT'])
    return jsonify([a.to_dict() for a in answers]), 200
