"""
Path parameter helpers.
"""

from fastapi import HTTPException, status


def parse_id(raw: str, label: str) -> int:
    """
    Parse a numeric record id from a path segment.

    Raises:
        HTTPException: 400 "Invalid {label} ID" if the segment is not an integer
    """
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} ID"
        )
