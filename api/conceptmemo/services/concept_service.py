"""
Concept service for business logic related to concept operations.

Every operation takes the caller's user_id explicitly. Ownership is checked
by loading through the user-scoped store, never by comparing ids afterwards.
"""
import logging
import time
from sqlmodel import Session
from typing import List, Optional

from conceptmemo.core.config import settings
from conceptmemo.core.exceptions import NotFoundError
from conceptmemo.models import Concept
from conceptmemo.schemas.concept import ConceptRequest
from conceptmemo.services import concept_store, search_service

logger = logging.getLogger(__name__)


def create_concept(
    session: Session,
    user_id: str,
    request: ConceptRequest
) -> Concept:
    """
    Create a concept owned by user_id.

    Only name and notes are taken from the request; the owner always comes
    from the caller's session.
    """
    concept = Concept(
        user_id=user_id,
        name=request.name,
        notes=request.notes,
    )
    concept = concept_store.save(session, concept)
    logger.info(f"Created concept {concept.id} for user {user_id}")
    return concept


def list_concepts(
    session: Session,
    user_id: str,
    keyword: Optional[str] = None
) -> List[Concept]:
    """
    List a user's concepts, or search them when a keyword is given.

    An empty keyword lists everything, same as no keyword.
    """
    start_time = time.perf_counter()

    if keyword:
        concepts = search_service.search_by_keyword(session, user_id, keyword)
    else:
        concepts = concept_store.find_all_with_words(session, user_id)

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"Fetched {len(concepts)} concepts in {elapsed_ms:.1f}ms (query={keyword!r})")
    return concepts


def search_concepts(
    session: Session,
    user_id: str,
    keyword: str
) -> List[Concept]:
    """Search a user's concepts by keyword."""
    return search_service.search_by_keyword(session, user_id, keyword)


def get_concept(
    session: Session,
    user_id: str,
    concept_id: int
) -> Concept:
    """
    Get one of the user's concepts with its words.

    Raises:
        NotFoundError: If the concept does not exist or belongs to another user
    """
    start_time = time.perf_counter()
    concept = concept_store.find_by_id_with_words(session, concept_id, user_id)
    if concept is None:
        raise NotFoundError("Concept not found")

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"Fetched concept {concept_id} in {elapsed_ms:.1f}ms")
    return concept


def update_concept(
    session: Session,
    user_id: str,
    concept_id: int,
    request: ConceptRequest
) -> Concept:
    """
    Overwrite the name and notes of one of the user's concepts.

    The id, owner, and words of the concept are left as they are.

    Raises:
        NotFoundError: If the concept does not exist or belongs to another user
    """
    concept = get_concept(session, user_id, concept_id)
    concept.name = request.name
    concept.notes = request.notes
    concept = concept_store.save(session, concept)
    logger.info(f"Updated concept {concept_id} for user {user_id}")
    return concept


def delete_concept(
    session: Session,
    user_id: str,
    concept_id: int
) -> None:
    """
    Delete one of the user's concepts together with all its words.

    Raises:
        NotFoundError: If the concept does not exist or belongs to another user
    """
    concept = get_concept(session, user_id, concept_id)
    word_count = len(concept.words)
    concept_store.delete(session, concept)
    logger.info(f"Deleted concept {concept_id} and {word_count} words for user {user_id}")


def search_public_concepts(
    session: Session,
    keyword: str
) -> List[Concept]:
    """Search the demo dataset; no session identity is involved."""
    return search_service.search_by_keyword(session, settings.demo_user_id, keyword)
