"""
Concept store - persistence primitives for concepts and their words.

Every read is parameterized by the owning user. There is no unscoped
lookup in this module; callers that only know a concept id cannot load it.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from typing import List, Optional

from conceptmemo.models import Concept

logger = logging.getLogger(__name__)


def save(session: Session, concept: Concept) -> Concept:
    """
    Persist a new or existing concept, cascading to its words.

    Storage errors are re-raised after rolling the session back.
    """
    try:
        session.add(concept)
        session.commit()
        session.refresh(concept)
    except SQLAlchemyError:
        session.rollback()
        logger.error(f"Failed to save concept {concept.id}", exc_info=True)
        raise
    return concept


def find_all_with_words(session: Session, user_id: str) -> List[Concept]:
    """Get every concept owned by user_id with its words loaded, newest first."""
    statement = (
        select(Concept)
        .where(Concept.user_id == user_id)
        .options(selectinload(Concept.words))
        .order_by(Concept.id.desc())  # type: ignore[union-attr]
    )
    return list(session.exec(statement).all())


def find_by_id_with_words(session: Session, concept_id: int, user_id: str) -> Optional[Concept]:
    """
    Get the concept matching both concept_id and user_id, or None.

    A concept that exists under a different user is returned as None,
    exactly like a concept that does not exist.
    """
    statement = (
        select(Concept)
        .where(Concept.id == concept_id, Concept.user_id == user_id)
        .options(selectinload(Concept.words))
    )
    return session.exec(statement).first()


def find_by_ids_with_words(session: Session, concept_ids: List[int], user_id: str) -> List[Concept]:
    """Get the given concepts owned by user_id with their words loaded, newest first."""
    if not concept_ids:
        return []
    statement = (
        select(Concept)
        .where(Concept.id.in_(concept_ids), Concept.user_id == user_id)  # type: ignore[union-attr]
        .options(selectinload(Concept.words))
        .order_by(Concept.id.desc())  # type: ignore[union-attr]
    )
    return list(session.exec(statement).all())


def delete(session: Session, concept: Concept) -> None:
    """Delete a concept; its words are removed by the relationship cascade."""
    try:
        session.delete(concept)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.error(f"Failed to delete concept {concept.id}", exc_info=True)
        raise
