"""
Keyword search over a user's concepts.

A keyword matches a concept when it occurs, case-sensitively, in the concept
name, in its notes, or in any of its words. Joining concept to word yields
one row per word, so the matched ids are collapsed to one entry per concept
before the concepts are loaded back with their complete word lists.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy import func, or_
from typing import List

from conceptmemo.models import Concept, Word
from conceptmemo.services import concept_store

logger = logging.getLogger(__name__)


def _contains(session: Session, column, keyword: str):
    """
    Build a case-sensitive substring predicate for column.

    LIKE folds case on SQLite and MySQL, so containment is tested with the
    dialect's position function instead. NULL columns never match.
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return func.strpos(column, keyword) > 0
    return func.instr(column, keyword) > 0


def search_by_keyword(session: Session, user_id: str, keyword: str) -> List[Concept]:
    """
    Find concepts owned by user_id whose name, notes, or words contain keyword.

    Args:
        session: Database session
        user_id: Owner of the concepts to search
        keyword: Substring to look for (matched case-sensitively, no wildcards)

    Returns:
        Matching concepts, newest first, each exactly once and each with all
        of its words attached (not only the matching ones). Empty list when
        nothing matches.
    """
    statement = (
        select(Concept.id)
        .outerjoin(Word, Word.concept_id == Concept.id)  # type: ignore[arg-type]
        .where(
            Concept.user_id == user_id,
            or_(
                _contains(session, Concept.name, keyword),
                _contains(session, Concept.notes, keyword),
                _contains(session, Word.word, keyword),
            ),
        )
        .order_by(Concept.id.desc())  # type: ignore[union-attr]
    )
    rows = session.exec(statement).all()

    # One row per matching word: keep the first occurrence of each concept id
    matched_ids = list(dict.fromkeys(rows))
    logger.debug(f"Keyword search for user {user_id}: {len(rows)} joined rows, {len(matched_ids)} concepts")

    return concept_store.find_by_ids_with_words(session, matched_ids, user_id)
