from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from prepper.core import config
from prepper.core.errors import Forbidden, TokenInvalid, TokenMissing
from prepper.models.user import Claims


def issue_token(user: dict, expires_days: int | None = None) -> str:
    expire_days = expires_days or config.JWT_EXPIRES_DAYS
    issued_at = datetime.now(timezone.utc)
    payload = {
        "id": user["id"],
        "email": user["email"],
        "role": user["role"],
        "iat": issued_at,
        "exp": issued_at + timedelta(days=expire_days),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )


def verify_token(token: str | None) -> Claims:
    if token is None or not token.strip():
        raise TokenMissing()

    try:
        payload = decode_token(token.strip())
        return Claims.model_validate(payload)
    except (jwt.PyJWTError, PydanticValidationError) as exc:
        raise TokenInvalid() from exc


def require_role(claims: Claims, role: str) -> None:
    if claims.role != role:
        raise Forbidden()
