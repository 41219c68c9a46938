import logging
from typing import Any

from prepper.core.errors import ValidationError
from prepper.database import DocumentStore
from prepper.models.attempt import Attempt, CareerResult
from prepper.services.auth_service import new_id, utc_now_iso
from prepper.services.scoring import Recommender

logger = logging.getLogger(__name__)


def list_questions(store: DocumentStore) -> list[dict]:
    return store.read('questions')


def submit_quiz(
    store: DocumentStore,
    user_id: str,
    answers: Any,
    recommender: Recommender,
) -> tuple[str, CareerResult]:
    if not isinstance(answers, list):
        raise ValidationError('Answers array is required')

    result = recommender.recommend(answers)

    attempt = Attempt(
        id=new_id(),
        userId=user_id,
        answers=answers,
        result=result,
        completedAt=utc_now_iso(),
    ).model_dump()
    store.append('attempts', attempt)
    logger.info('Recorded attempt %s for user %s (%s)', attempt['id'], user_id, result.careerPath)
    return attempt['id'], result
