"""
Word service - words are only reachable through a concept the caller owns.
"""
import logging
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from conceptmemo.core.exceptions import NotFoundError, ValidationError
from conceptmemo.models import Concept, Word
from conceptmemo.schemas.concept import WordRequest
from conceptmemo.services import concept_service

logger = logging.getLogger(__name__)


def _find_word(concept: Concept, word_id: int) -> Word:
    for word in concept.words:
        if word.id == word_id:
            return word
    raise NotFoundError("Word not found")


def _clean_word_text(request: WordRequest) -> str:
    word_stripped = request.word.strip()
    if not word_stripped:
        raise ValidationError("Word cannot be empty")
    return word_stripped


def _commit(session: Session, instance) -> None:
    try:
        session.add(instance)
        session.commit()
        session.refresh(instance)
    except SQLAlchemyError:
        session.rollback()
        raise


def add_word(
    session: Session,
    user_id: str,
    concept_id: int,
    request: WordRequest
) -> Word:
    """
    Attach a new word to one of the user's concepts.

    Raises:
        NotFoundError: If the concept does not exist or belongs to another user
        ValidationError: If the word text is blank
    """
    concept = concept_service.get_concept(session, user_id, concept_id)
    word = Word(
        concept_id=concept.id,
        word=_clean_word_text(request),
        language=request.language,
        ipa=request.ipa,
        nuance=request.nuance,
    )
    _commit(session, word)
    logger.info(f"Added word {word.id} to concept {concept_id}")
    return word


def update_word(
    session: Session,
    user_id: str,
    concept_id: int,
    word_id: int,
    request: WordRequest
) -> Word:
    """
    Overwrite a word on one of the user's concepts.

    Raises:
        NotFoundError: If the concept is not the user's or the word is not on it
        ValidationError: If the word text is blank
    """
    concept = concept_service.get_concept(session, user_id, concept_id)
    word = _find_word(concept, word_id)
    word.word = _clean_word_text(request)
    word.language = request.language
    word.ipa = request.ipa
    word.nuance = request.nuance
    _commit(session, word)
    logger.info(f"Updated word {word_id} on concept {concept_id}")
    return word


def delete_word(
    session: Session,
    user_id: str,
    concept_id: int,
    word_id: int
) -> None:
    """
    Remove a word from one of the user's concepts.

    Raises:
        NotFoundError: If the concept is not the user's or the word is not on it
    """
    concept = concept_service.get_concept(session, user_id, concept_id)
    word = _find_word(concept, word_id)
    try:
        session.delete(word)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    logger.info(f"Deleted word {word_id} from concept {concept_id}")
