"""
Concept model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from conceptmemo.models.word import Word


class Concept(SQLModel, table=True):
    """Concept table - a named memo owned by one anonymous user."""
    __tablename__ = "concept"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, nullable=False)  # Opaque session identifier of the owner, set once at creation
    name: Optional[str] = None
    notes: Optional[str] = None

    # Relationships
    # Words are owned by the concept: removing the concept removes its words
    words: List["Word"] = Relationship(
        back_populates="concept",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Word.id"},
    )
