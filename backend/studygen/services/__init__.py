# Services module

# Content generation
from studygen.services.content_generator import (
    generate_study_material,
    generate_quiz,
    fallback_study_material,
    fallback_quiz,
)

# Subject classification
from studygen.services.subject_classifier import (
    classify_fallback_subject,
    detect_subject,
)

# Quiz lifecycle
from studygen.services.quiz_lifecycle import (
    QuestionNotFoundError,
    compute_score,
    quiz_state,
    submit_answer,
)

__all__ = [
    # Content generation
    "generate_study_material",
    "generate_quiz",
    "fallback_study_material",
    "fallback_quiz",

    # Subject classification
    "classify_fallback_subject",
    "detect_subject",

    # Quiz lifecycle
    "QuestionNotFoundError",
    "compute_score",
    "quiz_state",
    "submit_answer",
]
