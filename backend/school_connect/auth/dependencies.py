from fastapi import Header, HTTPException, Depends, Request
from typing import Iterable, Optional

from school_connect import models
from school_connect.config.settings import settings
from school_connect.database import InMemoryDB, get_db
from school_connect.auth.service import auth_service


def get_session_id(request: Request, authorization: Optional[str] = Header(None)) -> Optional[str]:
    """
    Read the session id from the session cookie, or from an
    'Authorization: Bearer <session id>' header as sent by the mobile client.
    """
    if authorization:
        parts = authorization.split(' ')
        if len(parts) != 2 or parts[0] != 'Bearer' or not parts[1]:
            raise HTTPException(status_code=401, detail="Not authenticated")
        return parts[1]
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_session_id_lenient(request: Request, authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Like get_session_id, but a malformed Authorization header falls back to the cookie."""
    if authorization:
        parts = authorization.split(' ')
        if len(parts) == 2 and parts[0] == 'Bearer' and parts[1]:
            return parts[1]
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_optional_user(
    session_id: Optional[str] = Depends(get_session_id),
    db: InMemoryDB = Depends(get_db),
) -> Optional[models.User]:
    if not session_id:
        return None
    return auth_service.get_session_user(db, session_id)


async def get_current_user(
    user: Optional[models.User] = Depends(get_optional_user),
) -> models.User:
    """Require an authenticated session."""
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def ensure_self(current_user: models.User, user_id: int, detail: str) -> None:
    if current_user.id != user_id:
        raise HTTPException(status_code=403, detail=detail)


def ensure_self_or_admin(current_user: models.User, user_id: int, detail: str) -> None:
    if current_user.id != user_id and current_user.role != "admin":
        raise HTTPException(status_code=403, detail=detail)


def ensure_role(current_user: models.User, roles: Iterable[str], detail: str) -> None:
    if current_user.role not in roles:
        raise HTTPException(status_code=403, detail=detail)
