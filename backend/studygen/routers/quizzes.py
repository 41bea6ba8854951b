"""
Quizzes Router

API endpoints for quiz generation, retrieval, answer submission and results.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from studygen.database import get_db
from studygen.dependencies.auth import get_current_user
from studygen.models.models import User
from studygen.schemas.study import (
    GenerateQuizRequest,
    QuizQuestionResponse,
    QuizResponse,
    QuizResultsResponse,
    QuizWithQuestionsResponse,
    SubmitQuizAnswerRequest,
)
from studygen.services import storage
from studygen.services.content_generator import generate_quiz
from studygen.services.quiz_lifecycle import QuestionNotFoundError, quiz_state, submit_answer
from studygen.services.subject_classifier import detect_subject
from studygen.utils.params import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.get("", response_model=List[QuizResponse])
def list_quizzes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's quizzes, newest first."""
    try:
        return storage.get_quizzes_by_user_id(db, current_user.id)
    except Exception:
        logger.error("Error fetching quizzes", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch quizzes")


@router.post("", response_model=QuizWithQuestionsResponse, status_code=status.HTTP_201_CREATED)
def create_quiz(
    request: GenerateQuizRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Generate a multiple-choice quiz and save it with its questions.

    Falls back to canned questions when the generation service is unavailable.
    """
    try:
        if request.session_id is not None and not storage.get_study_session(db, request.session_id):
            raise HTTPException(status_code=400, detail="Study session not found")

        questions_data = generate_quiz(request)
        subject = request.subject or detect_subject(request.topic)

        quiz = storage.create_quiz(
            db,
            user_id=current_user.id,
            session_id=request.session_id,
            topic=request.topic,
            subject=subject,
            difficulty=request.difficulty,
            total_questions=request.total_questions,
        )
        storage.create_quiz_questions(db, quiz.id, questions_data)

        return {
            "quiz": quiz,
            "questions": storage.get_quiz_questions_by_quiz_id(db, quiz.id)
        }
    except HTTPException:
        raise
    except Exception:
        logger.error("Error creating quiz", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create quiz")


@router.get("/{quiz_id}", response_model=QuizWithQuestionsResponse)
def get_quiz(
    quiz_id: str,
    db: Session = Depends(get_db)
):
    """Get a quiz with all of its questions."""
    qid = parse_id(quiz_id, "quiz")

    try:
        quiz = storage.get_quiz(db, qid)
        if not quiz:
            raise HTTPException(status_code=404, detail="Quiz not found")

        return {
            "quiz": quiz,
            "questions": storage.get_quiz_questions_by_quiz_id(db, qid)
        }
    except HTTPException:
        raise
    except Exception:
        logger.error("Error fetching quiz %d", qid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch quiz")


@router.post("/{quiz_id}/answers", response_model=QuizQuestionResponse)
def submit_quiz_answer(
    quiz_id: str,
    request: SubmitQuizAnswerRequest,
    db: Session = Depends(get_db)
):
    """
    Submit an answer to one question of a quiz.

    When this answers the last open question the quiz is scored and marked
    completed.
    """
    qid = parse_id(quiz_id, "quiz")

    if qid != request.quiz_id:
        raise HTTPException(status_code=400, detail="Quiz ID mismatch")

    try:
        question = storage.get_quiz_question(db, request.question_id)
        if not question:
            raise HTTPException(status_code=404, detail="Question not found")
        if question.quiz_id != qid:
            raise HTTPException(status_code=400, detail="Question does not belong to this quiz")

        return submit_answer(db, qid, request.question_id, request.answer)
    except QuestionNotFoundError:
        raise HTTPException(status_code=404, detail="Question not found")
    except HTTPException:
        raise
    except Exception:
        logger.error("Error submitting answer for quiz %d", qid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to submit quiz answer")


@router.get("/{quiz_id}/results", response_model=QuizResultsResponse)
def get_quiz_results(
    quiz_id: str,
    db: Session = Depends(get_db)
):
    """Get a quiz's questions with submitted answers, completion flag, score and lifecycle state."""
    qid = parse_id(quiz_id, "quiz")

    try:
        quiz = storage.get_quiz(db, qid)
        if not quiz:
            raise HTTPException(status_code=404, detail="Quiz not found")

        questions = storage.get_quiz_questions_by_quiz_id(db, qid)

        return {
            "quiz": quiz,
            "questions": questions,
            "completed": quiz.completed,
            "score": quiz.score,
            "state": quiz_state(quiz, questions)
        }
    except HTTPException:
        raise
    except Exception:
        logger.error("Error fetching results for quiz %d", qid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch quiz results")
