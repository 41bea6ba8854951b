"""
Persistence Store

Record-level CRUD for users, study sessions, quizzes and quiz questions.

Every function takes the request's SQLAlchemy session. Writes commit
immediately and "set and return" operations hand back the row as re-read
from the database, never an in-memory guess.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from studygen.models.models import User, StudySession, Quiz, QuizQuestion
from studygen.services.auth import hash_password

logger = logging.getLogger(__name__)


# =============================================================================
# USERS
# =============================================================================

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str) -> User:
    """Create a user, storing only the bcrypt hash of the password."""
    user = User(username=username, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def ensure_demo_user(db: Session, username: str, password: str) -> User:
    """
    Make sure the demo account exists.

    Idempotent: returns the existing user when it is already there.
    """
    user = get_user_by_username(db, username)
    if user:
        return user

    logger.info("Seeding demo user %r", username)
    return create_user(db, username, password)


# =============================================================================
# STUDY SESSIONS
# =============================================================================

def create_study_session(
    db: Session,
    user_id: int,
    topic: str,
    content: str,
    format: str,
    difficulty: str,
    learning_style: str,
    include_examples: bool = True,
    include_visuals: bool = True,
    subject: Optional[str] = None,
) -> StudySession:
    now = datetime.utcnow()
    session = StudySession(
        user_id=user_id,
        topic=topic,
        subject=subject,
        content=content,
        format=format,
        difficulty=difficulty,
        learning_style=learning_style,
        include_examples=include_examples,
        include_visuals=include_visuals,
        created_at=now,
        last_accessed=now,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def get_study_session(db: Session, session_id: int) -> Optional[StudySession]:
    return db.query(StudySession).filter(StudySession.id == session_id).first()


def get_study_sessions_by_user_id(db: Session, user_id: int) -> List[StudySession]:
    """A user's study sessions, most recently accessed first."""
    return db.query(StudySession).filter(
        StudySession.user_id == user_id
    ).order_by(StudySession.last_accessed.desc(), StudySession.id.desc()).all()


def update_study_session_last_accessed(db: Session, session_id: int) -> Optional[StudySession]:
    session = get_study_session(db, session_id)
    if not session:
        return None

    session.last_accessed = datetime.utcnow()
    db.commit()
    db.refresh(session)
    return session


def delete_study_session(db: Session, session_id: int) -> bool:
    """
    Delete a study session.

    Quizzes generated from the session are kept and detached from it.

    Returns:
        True if a session was deleted, False if none had that id
    """
    db.query(Quiz).filter(Quiz.session_id == session_id).update(
        {Quiz.session_id: None}, synchronize_session=False
    )
    deleted = db.query(StudySession).filter(
        StudySession.id == session_id
    ).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


# =============================================================================
# QUIZZES
# =============================================================================

def create_quiz(
    db: Session,
    user_id: int,
    topic: str,
    difficulty: str,
    total_questions: int,
    subject: Optional[str] = None,
    session_id: Optional[int] = None,
) -> Quiz:
    """Create an unanswered quiz (completed false, no score)."""
    quiz = Quiz(
        user_id=user_id,
        session_id=session_id,
        topic=topic,
        subject=subject,
        difficulty=difficulty,
        total_questions=total_questions,
        completed=False,
        score=None,
        created_at=datetime.utcnow(),
    )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    return quiz


def get_quiz(db: Session, quiz_id: int) -> Optional[Quiz]:
    return db.query(Quiz).filter(Quiz.id == quiz_id).first()


def get_quizzes_by_user_id(db: Session, user_id: int) -> List[Quiz]:
    """A user's quizzes, newest first."""
    return db.query(Quiz).filter(
        Quiz.user_id == user_id
    ).order_by(Quiz.created_at.desc(), Quiz.id.desc()).all()


def get_quizzes_by_session_id(db: Session, session_id: int) -> List[Quiz]:
    """Quizzes generated from a study session, newest first."""
    return db.query(Quiz).filter(
        Quiz.session_id == session_id
    ).order_by(Quiz.created_at.desc(), Quiz.id.desc()).all()


def update_quiz_score(db: Session, quiz_id: int, score: int) -> Optional[Quiz]:
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        return None

    quiz.score = score
    db.commit()
    db.refresh(quiz)
    return quiz


def mark_quiz_completed(db: Session, quiz_id: int) -> Optional[Quiz]:
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        return None

    quiz.completed = True
    db.commit()
    db.refresh(quiz)
    return quiz


def complete_quiz(db: Session, quiz_id: int, score: int) -> bool:
    """
    Record the final score and mark the quiz completed in one statement.

    The update only matches a quiz that is not yet completed, so the
    transition happens at most once even when two final answers race.

    Returns:
        True if this call completed the quiz, False if it was already completed
        or does not exist
    """
    updated = db.query(Quiz).filter(
        Quiz.id == quiz_id,
        Quiz.completed.is_(False)
    ).update(
        {Quiz.score: score, Quiz.completed: True},
        synchronize_session=False
    )
    db.commit()
    return updated > 0


# =============================================================================
# QUIZ QUESTIONS
# =============================================================================

def create_quiz_question(
    db: Session,
    quiz_id: int,
    question_text: str,
    options: List[str],
    correct_option_index: int,
    explanation: Optional[str] = None,
) -> QuizQuestion:
    question = QuizQuestion(
        quiz_id=quiz_id,
        question_text=question_text,
        options=list(options),
        correct_option_index=correct_option_index,
        explanation=explanation,
        user_answer=None,
        correct=None,
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


def create_quiz_questions(
    db: Session,
    quiz_id: int,
    questions: Iterable[Dict[str, Any]],
) -> List[QuizQuestion]:
    """
    Create a batch of questions for a quiz.

    Args:
        questions: Dicts with questionText, options, correctOptionIndex, explanation
    """
    created = [
        QuizQuestion(
            quiz_id=quiz_id,
            question_text=q["questionText"],
            options=list(q["options"]),
            correct_option_index=q["correctOptionIndex"],
            explanation=q.get("explanation"),
        )
        for q in questions
    ]
    db.add_all(created)
    db.commit()
    for question in created:
        db.refresh(question)
    return created


def get_quiz_question(db: Session, question_id: int) -> Optional[QuizQuestion]:
    return db.query(QuizQuestion).filter(QuizQuestion.id == question_id).first()


def get_quiz_questions_by_quiz_id(db: Session, quiz_id: int) -> List[QuizQuestion]:
    return db.query(QuizQuestion).filter(
        QuizQuestion.quiz_id == quiz_id
    ).order_by(QuizQuestion.id).all()


def submit_quiz_answer(db: Session, question_id: int, answer: int) -> Optional[QuizQuestion]:
    """
    Record an answer and whether it matches the correct option.

    Returns:
        The updated question, or None if no question has that id
    """
    question = get_quiz_question(db, question_id)
    if not question:
        return None

    question.user_answer = answer
    question.correct = answer == question.correct_option_index
    db.commit()
    db.refresh(question)
    return question
