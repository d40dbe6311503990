"""
Public read-only endpoints over the demo dataset.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from conceptmemo.core.database import get_session
from conceptmemo.schemas.concept import ConceptResponse
from conceptmemo.services import concept_service

router = APIRouter(prefix="/public", tags=["public"])


@router.get("/demo-concepts/search", response_model=List[ConceptResponse])
async def search_demo_concepts(
    keyword: str,
    session: Session = Depends(get_session)
):
    """Search the demo user's concepts. No session cookie is needed or read."""
    concepts = concept_service.search_public_concepts(session, keyword)
    return [ConceptResponse.model_validate(concept) for concept in concepts]
