import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from prepper.auth import jwt_handler
from prepper.core.errors import TokenInvalid
from prepper.models.user import Claims

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Claims:
    token = credentials.credentials if credentials else None
    try:
        claims = jwt_handler.verify_token(token)
    except TokenInvalid:
        logger.warning('Rejected invalid or expired token for %s', request.url.path)
        raise

    request.state.claims = claims
    return claims


def require_admin(claims: Claims = Depends(get_current_claims)) -> Claims:
    jwt_handler.require_role(claims, 'admin')
    return claims
