"""
FastAPI Dependencies for StudyGen
"""

from studygen.dependencies.auth import (
    get_current_user,
    seed_demo_user,
)

__all__ = [
    "get_current_user",
    "seed_demo_user",
]
