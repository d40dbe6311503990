"""
Concept and word schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class WordResponse(BaseModel):
    """Word response schema."""
    id: int
    concept_id: int
    word: Optional[str] = None
    language: Optional[str] = None
    ipa: Optional[str] = None
    nuance: Optional[str] = None

    class Config:
        from_attributes = True


class ConceptResponse(BaseModel):
    """Concept response schema, always carrying the complete word list."""
    id: int
    user_id: str
    name: Optional[str] = None
    notes: Optional[str] = None
    words: List[WordResponse] = []

    class Config:
        from_attributes = True


class ConceptRequest(BaseModel):
    """
    Request schema for creating or updating a concept.

    Only name and notes are read. Anything else the client sends
    (id, userId, words) is dropped during parsing.
    """
    name: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        extra = "ignore"


class WordRequest(BaseModel):
    """Request schema for adding or updating a word on a concept."""
    word: str = Field(..., description="The word text (cannot be blank)")
    language: Optional[str] = None
    ipa: Optional[str] = None
    nuance: Optional[str] = None

    class Config:
        extra = "ignore"
