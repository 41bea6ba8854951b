"""
Study Sessions Router

Generate, list, open and delete study sessions for the current user.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from studygen.database import get_db
from studygen.dependencies.auth import get_current_user
from studygen.models.models import User
from studygen.schemas.study import (
    GenerateStudyMaterialRequest,
    QuizResponse,
    StudySessionResponse,
)
from studygen.services import storage
from studygen.services.content_generator import generate_study_material
from studygen.services.subject_classifier import detect_subject
from studygen.utils.params import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/study-sessions", tags=["study-sessions"])


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
def create_study_session(
    request: GenerateStudyMaterialRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Generate study material for a topic and save it as a new study session.

    Falls back to canned notes when the generation service is unavailable.
    """
    try:
        content = generate_study_material(request)
        subject = request.subject or detect_subject(request.topic)

        return storage.create_study_session(
            db,
            user_id=current_user.id,
            topic=request.topic,
            subject=subject,
            content=content,
            format=request.format,
            difficulty=request.difficulty,
            learning_style=request.learning_style,
            include_examples=request.include_examples,
            include_visuals=request.include_visuals,
        )
    except Exception:
        logger.error("Error creating study session", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create study session")


@router.get("", response_model=List[StudySessionResponse])
def list_study_sessions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's study sessions, most recently accessed first."""
    try:
        return storage.get_study_sessions_by_user_id(db, current_user.id)
    except Exception:
        logger.error("Error fetching study sessions", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch study sessions")


@router.get("/{session_id}", response_model=StudySessionResponse)
def get_study_session(
    session_id: str,
    db: Session = Depends(get_db)
):
    """Open a study session. Refreshes its last-accessed time."""
    sid = parse_id(session_id, "session")

    try:
        session = storage.update_study_session_last_accessed(db, sid)
    except Exception:
        logger.error("Error fetching study session %d", sid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch study session")

    if not session:
        raise HTTPException(status_code=404, detail="Study session not found")

    return session


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_study_session(
    session_id: str,
    db: Session = Depends(get_db)
):
    """Delete a study session. Quizzes made from it are kept."""
    sid = parse_id(session_id, "session")

    try:
        deleted = storage.delete_study_session(db, sid)
    except Exception:
        logger.error("Error deleting study session %d", sid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete study session")

    if not deleted:
        raise HTTPException(status_code=404, detail="Study session not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{session_id}/quizzes", response_model=List[QuizResponse])
def list_session_quizzes(
    session_id: str,
    db: Session = Depends(get_db)
):
    """List quizzes generated from a study session, newest first."""
    sid = parse_id(session_id, "session")

    try:
        session = storage.get_study_session(db, sid)
        quizzes = storage.get_quizzes_by_session_id(db, sid) if session else None
    except Exception:
        logger.error("Error fetching quizzes for study session %d", sid, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch quizzes")

    if session is None:
        raise HTTPException(status_code=404, detail="Study session not found")

    return quizzes
