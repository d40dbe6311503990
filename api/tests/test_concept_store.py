"""Tests for the user-scoped concept store"""
from sqlmodel import Session, select

from conceptmemo.models import Concept, Word
from conceptmemo.services import concept_store

USER_A = "user-a"
USER_B = "user-b"


class TestSave:
    """Persisting concepts"""

    def test_save_assigns_id(self, db_session: Session):
        concept = concept_store.save(db_session, Concept(user_id=USER_A, name="Entropy", notes="thermo"))
        assert concept.id is not None
        assert concept.user_id == USER_A

    def test_save_cascades_to_words(self, db_session: Session):
        concept = Concept(user_id=USER_A, name="Entropy")
        concept.words = [Word(word="heat"), Word(word="disorder")]
        concept = concept_store.save(db_session, concept)

        words = db_session.exec(select(Word).where(Word.concept_id == concept.id)).all()
        assert sorted(w.word for w in words) == ["disorder", "heat"]


class TestFindAllWithWords:
    """Listing a user's concepts"""

    def test_returns_only_owned_concepts(self, db_session: Session, make_concept):
        make_concept(USER_A, name="mine")
        make_concept(USER_B, name="theirs")

        concepts = concept_store.find_all_with_words(db_session, USER_A)
        assert [c.name for c in concepts] == ["mine"]

    def test_empty_for_user_without_concepts(self, db_session: Session, make_concept):
        make_concept(USER_A, name="mine")
        assert concept_store.find_all_with_words(db_session, USER_B) == []

    def test_words_loaded_and_newest_first(self, db_session: Session, make_concept):
        first = make_concept(USER_A, name="first", words=["a", "b"])
        second = make_concept(USER_A, name="second", words=["c"])

        concepts = concept_store.find_all_with_words(db_session, USER_A)
        assert [c.id for c in concepts] == [second.id, first.id]
        assert [w.word for w in concepts[1].words] == ["a", "b"]
        assert [w.word for w in concepts[0].words] == ["c"]

    def test_concept_with_many_words_listed_once(self, db_session: Session, make_concept):
        make_concept(USER_A, name="wordy", words=["one", "two", "three"])
        concepts = concept_store.find_all_with_words(db_session, USER_A)
        assert len(concepts) == 1
        assert len(concepts[0].words) == 3


class TestFindByIdWithWords:
    """Fetching one concept"""

    def test_found_for_owner(self, db_session: Session, make_concept):
        concept = make_concept(USER_A, name="Entropy", words=["heat"])
        found = concept_store.find_by_id_with_words(db_session, concept.id, USER_A)
        assert found is not None
        assert found.name == "Entropy"
        assert [w.word for w in found.words] == ["heat"]

    def test_foreign_concept_looks_missing(self, db_session: Session, make_concept):
        concept = make_concept(USER_A, name="Entropy")
        assert concept_store.find_by_id_with_words(db_session, concept.id, USER_B) is None

    def test_unknown_id(self, db_session: Session):
        assert concept_store.find_by_id_with_words(db_session, 9999, USER_A) is None


class TestFindByIdsWithWords:
    """Loading a set of concepts"""

    def test_filters_out_foreign_ids(self, db_session: Session, make_concept):
        mine = make_concept(USER_A, name="mine")
        theirs = make_concept(USER_B, name="theirs")

        concepts = concept_store.find_by_ids_with_words(db_session, [mine.id, theirs.id], USER_A)
        assert [c.id for c in concepts] == [mine.id]

    def test_empty_id_list(self, db_session: Session):
        assert concept_store.find_by_ids_with_words(db_session, [], USER_A) == []


class TestDelete:
    """Removing concepts"""

    def test_delete_cascades_to_words(self, db_session: Session, make_concept):
        concept = make_concept(USER_A, name="Entropy", words=["heat", "disorder"])
        concept_id = concept.id

        concept_store.delete(db_session, concept)

        assert db_session.get(Concept, concept_id) is None
        assert db_session.exec(select(Word).where(Word.concept_id == concept_id)).all() == []

    def test_delete_leaves_other_concepts(self, db_session: Session, make_concept):
        doomed = make_concept(USER_A, name="doomed", words=["x"])
        kept = make_concept(USER_A, name="kept", words=["y"])

        concept_store.delete(db_session, doomed)

        remaining = concept_store.find_all_with_words(db_session, USER_A)
        assert [c.id for c in remaining] == [kept.id]
        assert [w.word for w in remaining[0].words] == ["y"]
