import logging
import uuid
from datetime import datetime, timezone

from prepper.auth import jwt_handler
from prepper.auth.passwords import hash_password, verify_password
from prepper.core.errors import InvalidCredentials, NotFoundError, ValidationError
from prepper.database import DocumentStore
from prepper.models.user import Claims, User

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def user_summary(user: dict) -> dict:
    return {
        'id': user['id'],
        'name': user['name'],
        'email': user['email'],
        'role': user['role'],
    }


def find_user_by_email(store: DocumentStore, email: str) -> dict | None:
    return next((user for user in store.read('users') if user.get('email') == email), None)


def find_user_by_id(store: DocumentStore, user_id: str) -> dict | None:
    return next((user for user in store.read('users') if user.get('id') == user_id), None)


def _require_encodable(*values: str) -> None:
    for value in values:
        try:
            value.encode('utf-8')
        except UnicodeEncodeError as exc:
            raise ValidationError('Fields must be valid UTF-8 text') from exc


def create_user(store: DocumentStore, name: str, email: str, password: str, role: str = 'user') -> dict:
    if find_user_by_email(store, email) is not None:
        raise ValidationError('User already exists')

    user = User(
        id=new_id(),
        name=name,
        email=email,
        password=hash_password(password),
        role=role,
        createdAt=utc_now_iso(),
    ).model_dump()
    # Re-checked under the store lock; another signup may have won during hashing.
    if not store.append_unique('users', user, key='email'):
        raise ValidationError('User already exists')
    return user


def signup(store: DocumentStore, name: str | None, email: str | None, password: str | None) -> tuple[str, dict]:
    if not name or not email or not password:
        raise ValidationError('All fields are required')
    _require_encodable(name, email, password)

    user = create_user(store, name, email, password)
    logger.info('Created user %s', user['id'])
    return jwt_handler.issue_token(user), user_summary(user)


def login(store: DocumentStore, email: str | None, password: str | None) -> tuple[str, dict]:
    if not email or not password:
        raise ValidationError('Email and password are required')
    _require_encodable(email, password)

    user = find_user_by_email(store, email)
    if user is None or not verify_password(password, user.get('password', '')):
        raise InvalidCredentials()

    return jwt_handler.issue_token(user), user_summary(user)


def current_user(store: DocumentStore, claims: Claims) -> dict:
    user = find_user_by_id(store, claims.id)
    if user is None:
        raise NotFoundError('User not found')
    return user_summary(user)
