import pytest

from prepper.core.errors import StorageError, ValidationError
from prepper.database import InMemoryStore
from prepper.models.attempt import CareerResult
from prepper.services import quiz_service
from prepper.services.scoring import CallableRecommender, StubRecommender

TWO_A_ANSWERS = [{'qId': 1, 'answer': 'A'}, {'qId': 2, 'answer': 'A'}]


@pytest.fixture
def store():
    return InMemoryStore({
        'users': [],
        'attempts': [],
        'questions': [{'id': 1, 'text': 'Q1', 'options': [{'id': 'A', 'text': 'Yes'}]}],
    })


def test_list_questions_returns_full_set(store) -> None:
    assert quiz_service.list_questions(store) == [
        {'id': 1, 'text': 'Q1', 'options': [{'id': 'A', 'text': 'Yes'}]},
    ]


def test_submit_quiz_records_attempt(store) -> None:
    attempt_id, result = quiz_service.submit_quiz(store, 'u1', TWO_A_ANSWERS, StubRecommender())

    assert result.careerPath == 'Software Development'
    attempts = store.read('attempts')
    assert len(attempts) == 1
    assert attempts[0]['id'] == attempt_id
    assert attempts[0]['userId'] == 'u1'
    assert attempts[0]['answers'] == TWO_A_ANSWERS
    assert attempts[0]['result'] == result.model_dump()
    assert attempts[0]['completedAt']


def test_submitted_attempt_survives_reload(store) -> None:
    attempt_id, result = quiz_service.submit_quiz(store, 'u1', TWO_A_ANSWERS, StubRecommender())

    reloaded = store.reload()['attempts']

    assert [attempt['id'] for attempt in reloaded] == [attempt_id]
    assert CareerResult.model_validate(reloaded[0]['result']) == result


def test_submit_quiz_accepts_malformed_entries(store) -> None:
    answers = [{'qId': 999, 'answer': 'Z'}, 'junk', {'unexpected': True}]

    _, result = quiz_service.submit_quiz(store, 'u1', answers, StubRecommender())

    assert result.careerPath == 'Software Development'
    assert store.read('attempts')[0]['answers'] == answers


@pytest.mark.parametrize('answers', [None, 'A', {'qId': 1, 'answer': 'A'}, 3])
def test_submit_quiz_requires_answer_list(store, answers) -> None:
    with pytest.raises(ValidationError) as exception_info:
        quiz_service.submit_quiz(store, 'u1', answers, StubRecommender())

    assert exception_info.value.message == 'Answers array is required'
    assert store.read('attempts') == []


def test_submit_quiz_uses_injected_recommender(store) -> None:
    custom = CareerResult(careerPath='UX Design', confidenceScore=77, explanation='e', strengths=[], roadmap=[])

    _, result = quiz_service.submit_quiz(store, 'u1', TWO_A_ANSWERS, CallableRecommender(lambda answers: custom))

    assert result == custom
    assert store.read('attempts')[0]['result']['careerPath'] == 'UX Design'


def test_submit_quiz_persists_nothing_when_recommender_fails(store) -> None:
    def broken(answers):
        raise StorageError('remote unavailable')

    with pytest.raises(StorageError):
        quiz_service.submit_quiz(store, 'u1', TWO_A_ANSWERS, CallableRecommender(broken))

    assert store.read('attempts') == []
