from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from studygen.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    study_sessions = relationship("StudySession", back_populates="user")
    quizzes = relationship("Quiz", back_populates="user")


class StudySession(Base):
    """Generated study notes plus the parameters they were generated with"""
    __tablename__ = "study_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    topic = Column(String, nullable=False)
    subject = Column(String, nullable=True)  # Display label, e.g. "Mathematics"
    content = Column(Text, nullable=False)  # Markdown
    format = Column(String, nullable=False)  # "notes", "summary", "flashcards", ...
    difficulty = Column(String, nullable=False)
    learning_style = Column(String, nullable=False)
    include_examples = Column(Boolean, default=True, nullable=False)
    include_visuals = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_accessed = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="study_sessions")
    quizzes = relationship("Quiz", back_populates="session")


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    session_id = Column(
        Integer, ForeignKey("study_sessions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    topic = Column(String, nullable=False)
    subject = Column(String, nullable=True)
    difficulty = Column(String, nullable=False)
    total_questions = Column(Integer, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    score = Column(Integer, nullable=True)  # 0-100, set on completion
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="quizzes")
    session = relationship("StudySession", back_populates="quizzes")
    questions = relationship(
        "QuizQuestion",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuizQuestion.id",
    )


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    quiz_id = Column(Integer, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # List of 4 answer options
    correct_option_index = Column(Integer, nullable=False)  # 0-3
    explanation = Column(Text, nullable=True)
    user_answer = Column(Integer, nullable=True)
    correct = Column(Boolean, nullable=True)

    # Relationships
    quiz = relationship("Quiz", back_populates="questions")
