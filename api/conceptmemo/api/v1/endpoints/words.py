"""
Word endpoints, nested under the owning concept.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from conceptmemo.core.database import get_session
from conceptmemo.schemas.concept import WordResponse, WordRequest
from conceptmemo.services import word_service
from conceptmemo.services.session_service import get_current_user_id

router = APIRouter(prefix="/concepts/{concept_id}/words", tags=["words"])


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def add_word(
    concept_id: int,
    request: WordRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Add a word to a concept."""
    word = word_service.add_word(session, user_id, concept_id, request)
    return WordResponse.model_validate(word)


@router.put("/{word_id}", response_model=WordResponse)
async def update_word(
    concept_id: int,
    word_id: int,
    request: WordRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Update a word on a concept."""
    word = word_service.update_word(session, user_id, concept_id, word_id, request)
    return WordResponse.model_validate(word)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    concept_id: int,
    word_id: int,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Delete a word from a concept."""
    word_service.delete_word(session, user_id, concept_id, word_id)
    return None
