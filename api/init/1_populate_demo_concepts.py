"""
Script to populate the demo user's concepts for the public search page.
Wipes the demo user's concepts (and their words) and recreates them from DEMO_CONCEPTS.
"""
import sys
import logging
from sqlmodel import Session, select
from conceptmemo.core.config import settings
from conceptmemo.core.database import engine, init_db
from conceptmemo.models import Concept, Word

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# (name, notes, [(word, language)])
DEMO_CONCEPTS = [
    ("Entropy", "thermo: a measure of disorder in a system",
     [("heat", "en"), ("disorder", "en"), ("エントロピー", "ja")]),
    ("Serendipity", "finding something good without looking for it",
     [("serendipity", "en"), ("偶然の幸運", "ja"), ("casualidad", "es")]),
    ("Wabi-sabi", "beauty in imperfection and impermanence",
     [("侘寂", "ja"), ("imperfection", "en")]),
    ("Saudade", "a longing for something absent",
     [("saudade", "pt"), ("longing", "en"), ("郷愁", "ja")]),
    ("Inertia", "an object keeps its state of motion unless acted on",
     [("inertia", "en"), ("慣性", "ja"), ("Trägheit", "de")]),
]


def populate_demo_concepts():
    """Replace the demo user's concepts with DEMO_CONCEPTS."""
    demo_user_id = settings.demo_user_id
    with Session(engine) as session:
        try:
            existing = session.exec(
                select(Concept).where(Concept.user_id == demo_user_id)
            ).all()
            logger.info(f"Deleting {len(existing)} existing demo concepts...")
            for concept in existing:
                session.delete(concept)

            for name, notes, words in DEMO_CONCEPTS:
                concept = Concept(user_id=demo_user_id, name=name, notes=notes)
                concept.words = [Word(word=word, language=language) for word, language in words]
                session.add(concept)

            session.commit()
            logger.info(f"Created {len(DEMO_CONCEPTS)} demo concepts for user '{demo_user_id}'")

        except Exception as e:
            session.rollback()
            logger.error("Error populating demo concepts: %s", e, exc_info=True)
            raise


if __name__ == "__main__":
    logger.info("Starting demo concept population...")
    try:
        init_db()
        populate_demo_concepts()
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during demo concept population: %s", e, exc_info=True)
        sys.exit(1)
