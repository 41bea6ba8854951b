"""
StudyGen Utilities Package

Contains:
- params: Path parameter parsing
"""

from studygen.utils.params import parse_id

__all__ = [
    "parse_id"
]
