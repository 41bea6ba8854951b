"""
Quiz Lifecycle

A quiz moves created -> in_progress -> completed as its questions are
answered. Completion is one-way: once every question has an answer the score
is written together with the completed flag and never recomputed.
"""

import logging
from typing import Sequence

from sqlalchemy.orm import Session

from studygen.models.models import Quiz, QuizQuestion
from studygen.services import storage

logger = logging.getLogger(__name__)

STATE_CREATED = "created"
STATE_IN_PROGRESS = "in_progress"
STATE_COMPLETED = "completed"


class QuestionNotFoundError(Exception):
    """Raised when an answer is submitted for a question that does not exist."""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found")


def compute_score(questions: Sequence[QuizQuestion]) -> int:
    """Percentage of correct answers, rounded half up. 0 for an empty quiz."""
    total = len(questions)
    if total == 0:
        return 0

    correct_count = sum(1 for q in questions if q.correct)
    # round(100 * correct / total) with halves rounded up, in integer arithmetic
    return (200 * correct_count + total) // (2 * total)


def all_answered(questions: Sequence[QuizQuestion]) -> bool:
    return bool(questions) and all(q.user_answer is not None for q in questions)


def quiz_state(quiz: Quiz, questions: Sequence[QuizQuestion]) -> str:
    if quiz.completed:
        return STATE_COMPLETED
    if any(q.user_answer is not None for q in questions):
        return STATE_IN_PROGRESS
    return STATE_CREATED


def submit_answer(db: Session, quiz_id: int, question_id: int, answer: int) -> QuizQuestion:
    """
    Record an answer and complete the quiz if it was the last one outstanding.

    Args:
        quiz_id: Quiz the question belongs to (ownership is checked by the caller)
        question_id: Question being answered
        answer: Zero-based option index; out-of-range values are stored and simply never match

    Returns:
        The updated question

    Raises:
        QuestionNotFoundError: If the question does not exist
    """
    question = storage.submit_quiz_answer(db, question_id, answer)
    if question is None:
        raise QuestionNotFoundError(question_id)

    questions = storage.get_quiz_questions_by_quiz_id(db, quiz_id)
    if all_answered(questions):
        score = compute_score(questions)
        if storage.complete_quiz(db, quiz_id, score):
            logger.info("Quiz %d completed with score %d", quiz_id, score)

    return question
