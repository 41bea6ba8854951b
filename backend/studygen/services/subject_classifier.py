"""
Subject Classifier

Keyword-based mapping from a free-text topic to a fixed subject category.

Two independent strategies with different category sets:

- classify_fallback_subject: picks which canned fallback content to serve
  when generation fails (mathematics / history / science / default).
- detect_subject: picks the human-readable subject label stored on study
  sessions and quizzes when the request did not name one.

Both always return a category. Categories are checked in table order and
the first keyword hit wins.
"""

from typing import List, Optional, Tuple

FALLBACK_DEFAULT = "default"

# Subject hints (request.subject) checked before the topic scan
FALLBACK_SUBJECT_HINTS: List[Tuple[str, List[str]]] = [
    ("mathematics", ["math"]),
    ("history", ["history"]),
    ("science", ["biology", "chemistry", "physics"]),
]

FALLBACK_TOPIC_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("mathematics", [
        "math", "algebra", "calculus", "geometry", "equation", "theorem",
        "arithmetic", "trigonometry", "statistics", "probability",
    ]),
    ("history", [
        "history", "world war", "ancient", "civilization", "medieval",
        "renaissance", "revolution", "empire", "dynasty", "century", "historical",
    ]),
    ("science", [
        "biology", "cell", "dna", "evolution", "science", "physics", "chemistry",
        "atom", "molecule", "genetics", "organism", "quantum", "photosynthesis",
        "theory",
    ]),
]

SUBJECT_GENERAL = "General"

SUBJECT_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("Mathematics", ["math", "calculus", "algebra", "geometry"]),
    ("Physics", ["physics", "mechanics", "quantum"]),
    ("Biology", ["biology", "cell", "organism", "genetics"]),
    ("Chemistry", ["chemistry", "chemical", "molecule"]),
    ("History", ["history", "war", "century"]),
    ("Literature", ["literature", "novel", "poetry"]),
    ("Computer Science", ["computer", "programming", "algorithm"]),
]


def _first_match(text: str, table: List[Tuple[str, List[str]]]) -> Optional[str]:
    lowered = text.lower()
    for category, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return category
    return None


def classify_fallback_subject(topic: str, subject: Optional[str] = None) -> str:
    """
    Choose the fallback content category for a topic.

    An explicit subject hint is tried first; a hint that matches nothing
    falls through to scanning the topic text.

    Returns:
        One of "mathematics", "history", "science" or "default"
    """
    if subject:
        category = _first_match(subject, FALLBACK_SUBJECT_HINTS)
        if category:
            return category

    return _first_match(topic or "", FALLBACK_TOPIC_KEYWORDS) or FALLBACK_DEFAULT


def detect_subject(topic: str) -> str:
    """Return the display subject for a topic, "General" when nothing matches."""
    return _first_match(topic or "", SUBJECT_KEYWORDS) or SUBJECT_GENERAL
