"""Translation between stored Quiz entities and the QuizViewModel wire shape."""

from typing import Iterable, List

from src.domain.models.db_models import Quiz
from src.domain.models.api_models import QuizViewModel


def to_view_model(quiz: Quiz) -> QuizViewModel:
    return QuizViewModel(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description,
        text=quiz.text,
        notes=quiz.notes,
        created_date=quiz.created_date,
        last_modified_date=quiz.last_modified_date,
    )


def to_view_model_array(quizzes: Iterable[Quiz]) -> List[QuizViewModel]:
    return [to_view_model(quiz) for quiz in quizzes]


def apply_editable_fields(model: QuizViewModel, quiz: Quiz) -> Quiz:
    """
    Return a copy of `quiz` carrying the client-editable fields of `model`.

    Only Title, Description, Text and Notes are copied. Id, timestamps and
    the author id always come from the server side.
    """
    return quiz.model_copy(update={
        "title": model.title,
        "description": model.description,
        "text": model.text,
        "notes": model.notes,
    })
