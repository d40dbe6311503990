"""
Word model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from conceptmemo.models.concept import Concept


class Word(SQLModel, table=True):
    """Word table - a short text tag attached to exactly one concept."""
    __tablename__ = "word"

    id: Optional[int] = Field(default=None, primary_key=True)
    concept_id: int = Field(foreign_key="concept.id", index=True, nullable=False, ondelete="CASCADE")
    word: Optional[str] = None
    language: Optional[str] = None  # Free-text language label (e.g., 'en', 'ja')
    ipa: Optional[str] = None  # Pronunciation in IPA symbols
    nuance: Optional[str] = None  # Usage note for this word

    # Relationships
    concept: Optional["Concept"] = Relationship(back_populates="words")
