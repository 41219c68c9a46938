from datetime import datetime, timezone

from prepper.auth.jwt_handler import require_role
from prepper.database import DocumentStore
from prepper.models.user import Claims


RECENT_ATTEMPTS_LIMIT = 5

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _completed_at(attempt: dict) -> datetime:
    value = attempt.get('completedAt')
    if not isinstance(value, str):
        return _EARLIEST
    try:
        completed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return _EARLIEST
    if completed.tzinfo is None:
        completed = completed.replace(tzinfo=timezone.utc)
    return completed


def get_stats(store: DocumentStore, claims: Claims) -> dict:
    require_role(claims, 'admin')

    users = store.read('users')
    attempts = store.read('attempts')

    # Only the calling admin's own attempts are listed.
    own_attempts = [attempt for attempt in attempts if attempt.get('userId') == claims.id]
    recent_attempts = sorted(own_attempts, key=_completed_at, reverse=True)[:RECENT_ATTEMPTS_LIMIT]

    return {
        'totalUsers': len(users),
        'totalAttempts': len(attempts),
        'recentAttempts': recent_attempts,
        'adminUser': {'id': claims.id, 'email': claims.email},
    }
