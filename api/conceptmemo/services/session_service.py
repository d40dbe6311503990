"""
Anonymous session identity.

The session cookie is the only place the caller's identity comes from. It is
read once per request by the get_current_user_id dependency and then passed
explicitly into the services.
"""
import logging
import uuid
from fastapi import Request, Response
from typing import Optional

from conceptmemo.core.config import settings
from conceptmemo.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def new_user_id() -> str:
    """Generate a fresh opaque user identifier."""
    return str(uuid.uuid4())


def read_user_id(request: Request) -> Optional[str]:
    """Return the session identifier from the request cookie, if any."""
    user_id = request.cookies.get(settings.session_cookie_name)
    if user_id is None or not user_id.strip():
        return None
    return user_id


def set_session_cookie(response: Response, user_id: str) -> None:
    """Persist the identifier client-side for a year."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=user_id,
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def get_current_user_id(request: Request) -> str:
    """
    Dependency resolving the caller's user_id from the session cookie.

    Raises:
        AuthenticationError: If the request carries no session cookie
    """
    user_id = read_user_id(request)
    if user_id is None:
        raise AuthenticationError("Session not initialised")
    return user_id
