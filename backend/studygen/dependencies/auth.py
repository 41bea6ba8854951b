"""
Authentication Dependencies for StudyGen

The service runs with a single demo account. Handlers never hard-code a
user id; they depend on get_current_user, which resolves the configured
demo user and is the place to plug in real authentication later.

Usage:
    @router.get("/mine")
    def mine(current_user: User = Depends(get_current_user)):
        return {"user_id": current_user.id}
"""

import os
import logging

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from studygen.database import get_db
from studygen.models.models import User
from studygen.services import storage

logger = logging.getLogger(__name__)

DEMO_USERNAME = os.getenv("DEMO_USERNAME", "demo")
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "password")


def get_current_user(db: Session = Depends(get_db)) -> User:
    """
    FastAPI dependency returning the user the request acts for.

    Raises:
        HTTPException: 401 if the demo user has not been seeded
    """
    user = storage.get_user_by_username(db, DEMO_USERNAME)
    if not user:
        logger.error("Demo user %r is missing; was the database seeded?", DEMO_USERNAME)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return user


def seed_demo_user(db: Session) -> User:
    """Create the demo account if it does not exist yet. Safe to call repeatedly."""
    return storage.ensure_demo_user(db, DEMO_USERNAME, DEMO_PASSWORD)
