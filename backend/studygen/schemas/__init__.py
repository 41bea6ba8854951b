"""
StudyGen Schemas Package

Pydantic models for request/response validation and data structures.
"""

from studygen.schemas.study import (
    # Requests
    GenerateStudyMaterialRequest,
    GenerateQuizRequest,
    SubmitQuizAnswerRequest,

    # Model output
    GeneratedQuestion,
    GeneratedQuiz,

    # Responses
    StudySessionResponse,
    QuizResponse,
    QuizQuestionResponse,
    QuizWithQuestionsResponse,
    QuizResultsResponse,
)

__all__ = [
    # Requests
    "GenerateStudyMaterialRequest",
    "GenerateQuizRequest",
    "SubmitQuizAnswerRequest",

    # Model output
    "GeneratedQuestion",
    "GeneratedQuiz",

    # Responses
    "StudySessionResponse",
    "QuizResponse",
    "QuizQuestionResponse",
    "QuizWithQuestionsResponse",
    "QuizResultsResponse",
]
