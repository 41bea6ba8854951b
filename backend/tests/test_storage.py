"""
Tests for the persistence store.
"""

import pytest
from datetime import datetime, timedelta
from sqlalchemy.orm import Session

from studygen.models.models import User, StudySession, Quiz, QuizQuestion
from studygen.services import storage
from studygen.services.auth import verify_password


def make_session(db: Session, user: User, topic: str = "Genetics") -> StudySession:
    return storage.create_study_session(
        db,
        user_id=user.id,
        topic=topic,
        content=f"# {topic}",
        format="summary",
        difficulty="advanced",
        learning_style="reading",
    )


class TestUsers:
    """User records"""

    @pytest.mark.unit
    def test_create_user_hashes_password(self, db: Session):
        """Test the stored hash verifies but is not the plain password"""
        user = storage.create_user(db, "alice", "s3cret")
        assert user.id is not None
        assert user.password_hash != "s3cret"
        assert verify_password("s3cret", user.password_hash)
        assert storage.get_user(db, user.id).username == "alice"

    @pytest.mark.unit
    def test_get_user_by_username_missing(self, db: Session):
        """Test unknown usernames return None"""
        assert storage.get_user_by_username(db, "nobody") is None

    @pytest.mark.unit
    def test_ensure_demo_user_is_idempotent(self, db: Session):
        """Test seeding twice returns the same user"""
        first = storage.ensure_demo_user(db, "demo", "password")
        second = storage.ensure_demo_user(db, "demo", "password")
        assert first.id == second.id
        assert db.query(User).filter(User.username == "demo").count() == 1


class TestStudySessions:
    """Study session records"""

    @pytest.mark.unit
    def test_create_sets_ids_and_timestamps(self, db: Session, demo_user: User):
        """Test server-assigned fields are populated"""
        session = make_session(db, demo_user)
        assert session.id is not None
        assert session.created_at is not None
        assert session.last_accessed == session.created_at
        assert session.include_examples is True
        assert session.include_visuals is True
        assert session.subject is None

    @pytest.mark.unit
    def test_get_missing_returns_none(self, db: Session):
        """Test lookups of unknown ids return None"""
        assert storage.get_study_session(db, 999999) is None
        assert storage.update_study_session_last_accessed(db, 999999) is None

    @pytest.mark.unit
    def test_list_orders_by_last_accessed(self, db: Session, demo_user: User):
        """Test the most recently opened session comes first"""
        older = make_session(db, demo_user, "Older")
        newer = make_session(db, demo_user, "Newer")
        older.last_accessed = datetime.utcnow() + timedelta(minutes=5)
        db.commit()

        sessions = storage.get_study_sessions_by_user_id(db, demo_user.id)
        assert [s.id for s in sessions] == [older.id, newer.id]

    @pytest.mark.unit
    def test_list_is_scoped_to_user(self, db: Session, demo_user: User):
        """Test other users' sessions are not listed"""
        other = storage.create_user(db, "bob", "pw")
        make_session(db, other)
        assert storage.get_study_sessions_by_user_id(db, demo_user.id) == []

    @pytest.mark.unit
    def test_update_last_accessed_never_goes_back(self, db: Session, demo_user: User):
        """Test opening a session moves last_accessed forward"""
        session = make_session(db, demo_user)
        before = session.last_accessed
        updated = storage.update_study_session_last_accessed(db, session.id)
        assert updated.last_accessed >= before

    @pytest.mark.unit
    def test_delete_detaches_quizzes(self, db: Session, demo_user: User):
        """Test deleting a session keeps its quizzes with no session link"""
        session_id = make_session(db, demo_user).id
        quiz = storage.create_quiz(
            db, user_id=demo_user.id, topic="Genetics", difficulty="easy",
            total_questions=1, session_id=session_id
        )

        assert storage.delete_study_session(db, session_id) is True
        assert storage.get_study_session(db, session_id) is None

        kept = storage.get_quiz(db, quiz.id)
        assert kept is not None
        assert kept.session_id is None

    @pytest.mark.unit
    def test_delete_missing_returns_false(self, db: Session):
        """Test deleting an unknown id reports nothing deleted"""
        assert storage.delete_study_session(db, 999999) is False


class TestQuizzes:
    """Quiz and question records"""

    @pytest.mark.unit
    def test_create_quiz_starts_incomplete(self, test_quiz: Quiz):
        """Test a new quiz has no score and is not completed"""
        assert test_quiz.completed is False
        assert test_quiz.score is None

    @pytest.mark.unit
    def test_questions_are_stored_in_order(self, test_quiz_questions, sample_questions):
        """Test questions come back in creation order and unanswered"""
        assert [q.question_text for q in test_quiz_questions] == [
            q["questionText"] for q in sample_questions
        ]
        assert all(q.user_answer is None and q.correct is None for q in test_quiz_questions)

    @pytest.mark.unit
    def test_quizzes_by_session(self, db: Session, demo_user: User, test_study_session: StudySession):
        """Test only quizzes generated from the session are listed"""
        linked = storage.create_quiz(
            db, user_id=demo_user.id, topic="Photosynthesis", difficulty="easy",
            total_questions=1, session_id=test_study_session.id
        )
        storage.create_quiz(db, user_id=demo_user.id, topic="Other", difficulty="easy", total_questions=1)

        quizzes = storage.get_quizzes_by_session_id(db, test_study_session.id)
        assert [q.id for q in quizzes] == [linked.id]

    @pytest.mark.unit
    def test_quizzes_by_user_newest_first(self, db: Session, demo_user: User):
        """Test a user's quizzes are listed newest first"""
        first = storage.create_quiz(db, user_id=demo_user.id, topic="A", difficulty="easy", total_questions=1)
        second = storage.create_quiz(db, user_id=demo_user.id, topic="B", difficulty="easy", total_questions=1)

        quizzes = storage.get_quizzes_by_user_id(db, demo_user.id)
        assert [q.id for q in quizzes] == [second.id, first.id]

    @pytest.mark.unit
    def test_submit_answer_marks_correctness(self, db: Session, test_quiz_questions):
        """Test correct and incorrect answers are graded"""
        first, second = test_quiz_questions[0], test_quiz_questions[1]

        right = storage.submit_quiz_answer(db, first.id, first.correct_option_index)
        wrong = storage.submit_quiz_answer(db, second.id, 3)

        assert right.user_answer == first.correct_option_index
        assert right.correct is True
        assert wrong.user_answer == 3
        assert wrong.correct is False

    @pytest.mark.unit
    def test_submit_out_of_range_answer_is_incorrect(self, db: Session, test_quiz_questions):
        """Test an index outside 0-3 is stored and graded wrong"""
        question = storage.submit_quiz_answer(db, test_quiz_questions[0].id, 7)
        assert question.user_answer == 7
        assert question.correct is False

    @pytest.mark.unit
    def test_submit_answer_missing_question(self, db: Session):
        """Test answering an unknown question returns None"""
        assert storage.submit_quiz_answer(db, 999999, 0) is None

    @pytest.mark.unit
    def test_single_question_helpers(self, db: Session, test_quiz: Quiz):
        """Test create_quiz_question, update_quiz_score and mark_quiz_completed"""
        question = storage.create_quiz_question(
            db, test_quiz.id, "Extra?", ["a", "b", "c", "d"], 3, "Because d."
        )
        assert storage.get_quiz_question(db, question.id).options == ["a", "b", "c", "d"]

        assert storage.update_quiz_score(db, test_quiz.id, 50).score == 50
        assert storage.mark_quiz_completed(db, test_quiz.id).completed is True
        assert storage.update_quiz_score(db, 999999, 50) is None
        assert storage.mark_quiz_completed(db, 999999) is None

    @pytest.mark.unit
    def test_complete_quiz_happens_once(self, db: Session, test_quiz: Quiz):
        """Test the completion update only matches an incomplete quiz"""
        assert storage.complete_quiz(db, test_quiz.id, 67) is True
        assert storage.complete_quiz(db, test_quiz.id, 100) is False

        quiz = storage.get_quiz(db, test_quiz.id)
        assert quiz.completed is True
        assert quiz.score == 67

    @pytest.mark.unit
    def test_complete_missing_quiz(self, db: Session):
        """Test completing an unknown quiz reports no change"""
        assert storage.complete_quiz(db, 999999, 100) is False
