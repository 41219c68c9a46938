import json
import logging
from pathlib import Path

from prepper.core import config
from prepper.database import DocumentStore
from prepper.models.question import Question
from prepper.services.auth_service import create_user, find_user_by_email

logger = logging.getLogger(__name__)

QUESTIONS_FILE = Path(__file__).resolve().parent / 'data' / 'questions.json'


def load_seed_questions(path: Path = QUESTIONS_FILE) -> list[dict]:
    with path.open('r', encoding='utf-8') as handle:
        rows = json.load(handle)
    return [Question.model_validate(row).model_dump() for row in rows]


def seed_database(store: DocumentStore) -> None:
    """Ensure the admin account exists and the question set is populated."""
    if find_user_by_email(store, config.ADMIN_EMAIL) is None:
        create_user(store, config.ADMIN_NAME, config.ADMIN_EMAIL, config.ADMIN_PASSWORD, role='admin')
        logger.info('Admin user created: %s', config.ADMIN_EMAIL)

    if not store.read('questions'):
        store.write('questions', load_seed_questions())
        logger.info('Quiz questions seeded')
