"""
Concept CRUD and search endpoints, scoped to the caller's session.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List, Optional
from conceptmemo.core.database import get_session
from conceptmemo.schemas.concept import ConceptResponse, ConceptRequest
from conceptmemo.services import concept_service
from conceptmemo.services.session_service import get_current_user_id

router = APIRouter(prefix="/concepts", tags=["concepts"])


@router.post("", response_model=ConceptResponse, status_code=status.HTTP_201_CREATED)
async def create_concept(
    request: ConceptRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Create a concept owned by the current session.

    Any id, user id, or words in the request body are ignored.
    """
    concept = concept_service.create_concept(session, user_id, request)
    return ConceptResponse.model_validate(concept)


@router.get("", response_model=List[ConceptResponse])
async def get_concepts(
    query: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Get all concepts of the current session, or those matching query.

    Args:
        query: Optional keyword; when empty or missing all concepts are returned
    """
    concepts = concept_service.list_concepts(session, user_id, query)
    return [ConceptResponse.model_validate(concept) for concept in concepts]


@router.get("/search", response_model=List[ConceptResponse])
async def search_concepts(
    keyword: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Search the current session's concepts by name, notes, and words."""
    concepts = concept_service.search_concepts(session, user_id, keyword)
    return [ConceptResponse.model_validate(concept) for concept in concepts]


@router.get("/{concept_id}", response_model=ConceptResponse)
async def get_concept(
    concept_id: int,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get a concept by ID."""
    concept = concept_service.get_concept(session, user_id, concept_id)
    return ConceptResponse.model_validate(concept)


@router.put("/{concept_id}", response_model=ConceptResponse)
async def update_concept(
    concept_id: int,
    request: ConceptRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Update the name and notes of a concept."""
    concept = concept_service.update_concept(session, user_id, concept_id, request)
    return ConceptResponse.model_validate(concept)


@router.delete("/{concept_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_concept(
    concept_id: int,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Delete a concept and all its words."""
    concept_service.delete_concept(session, user_id, concept_id)
    return None
