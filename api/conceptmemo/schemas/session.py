"""
Session schemas.
"""
from pydantic import BaseModel


class SessionResponse(BaseModel):
    """Response schema for session initialisation."""
    user_id: str
    created: bool = False  # True when a new identifier was issued by this request
