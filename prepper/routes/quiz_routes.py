from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from prepper.auth.dependencies import get_current_claims
from prepper.database import DocumentStore, get_store
from prepper.models.attempt import CareerResult
from prepper.models.user import Claims
from prepper.services import quiz_service
from prepper.services.scoring import Recommender, get_recommender

router = APIRouter(tags=['quiz'])


class SubmitQuizRequest(BaseModel):
    # Entries are stored as submitted; unknown shapes score the default.
    answers: Any = None


class SubmitQuizResponse(BaseModel):
    success: bool
    result: CareerResult
    attemptId: str


@router.get('/questions')
def list_questions(store: DocumentStore = Depends(get_store)):
    return quiz_service.list_questions(store)


@router.post('/submit', response_model=SubmitQuizResponse)
def submit_quiz(
    payload: SubmitQuizRequest,
    claims: Claims = Depends(get_current_claims),
    store: DocumentStore = Depends(get_store),
    recommender: Recommender = Depends(get_recommender),
):
    attempt_id, result = quiz_service.submit_quiz(store, claims.id, payload.answers, recommender)
    return {'success': True, 'result': result, 'attemptId': attempt_id}
