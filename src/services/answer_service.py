from datetime import datetime, timezone
from typing import Callable, List, Optional

from src.domain.models.api_models import AnswerViewModel

FIRST_SAMPLE_ANSWER = "Friends and family"


def get_sample_answers(
    question_id: int,
    count: int = 5,
    clock: Optional[Callable[[], datetime]] = None,
) -> List[AnswerViewModel]:
    """
    Build `count` sample answers for a question. Nothing is persisted.

    Ids run from 1; the first answer has a fixed text and the rest read
    "Sample Answer {id}".
    """
    now = (clock or (lambda: datetime.now(timezone.utc)))()
    answers = []
    for answer_id in range(1, count + 1):
        text = FIRST_SAMPLE_ANSWER if answer_id == 1 else f"Sample Answer {answer_id}"
        answers.append(AnswerViewModel(
            id=answer_id,
            question_id=question_id,
            text=text,
            created_date=now,
            last_modified_date=now,
        ))
    return answers
