"""
Models package - imports all models so they register with SQLModel.
"""
from conceptmemo.models.concept import Concept
from conceptmemo.models.word import Word

__all__ = [
    'Concept',
    'Word',
]
