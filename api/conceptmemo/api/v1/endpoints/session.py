"""
Anonymous session endpoint.
"""
from fastapi import APIRouter, Request, Response
import logging
from conceptmemo.schemas.session import SessionResponse
from conceptmemo.services.session_service import new_user_id, read_user_id, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.post("/init", response_model=SessionResponse)
async def init_session(request: Request, response: Response):
    """Return the existing session identifier, or issue one and set the cookie."""
    existing_user_id = read_user_id(request)
    if existing_user_id is not None:
        return SessionResponse(user_id=existing_user_id)

    user_id = new_user_id()
    set_session_cookie(response, user_id)
    logger.info(f"Issued new session identifier {user_id}")
    return SessionResponse(user_id=user_id, created=True)
