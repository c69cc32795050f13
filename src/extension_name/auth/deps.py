"""
extension_name.auth.deps

FastAPI dependency functions implementing the "Secured" route guard.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Enforce authentication (and optional roles) before a secured handler runs.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from extension_name.api.deps import settings_dep
from extension_name.auth.jwt import JwtConfig, JwtValidationError, principal_from_token
from extension_name.auth.models import Principal
from extension_name.observability.logging import get_logger
from extension_name.settings import Settings

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def _reject(status_code: int, detail: str) -> HTTPException:
    log.info("auth_rejected", status_code=status_code, reason=detail)
    return HTTPException(status_code=status_code, detail=detail)


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    if creds is None or not creds.credentials:
        raise _reject(HTTP_401_UNAUTHORIZED, "Missing bearer token")

    try:
        return principal_from_token(cfg=JwtConfig.from_settings(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise _reject(HTTP_401_UNAUTHORIZED, f"Invalid token: {e}") from e


def secured(*required: str):
    """
    Guard factory for secured routers.

    Attach with `APIRouter(dependencies=[Depends(secured(...))])`. Without roles
    it only requires a valid bearer token.
    """

    required_set = frozenset(required)

    def _dep(principal: Principal = Depends(get_principal)) -> Principal:
        if not principal.has_roles(required_set):
            raise _reject(HTTP_403_FORBIDDEN, "Insufficient role")
        return principal

    return _dep
