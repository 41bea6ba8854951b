"""
Request/response schemas for study sessions and quizzes.

All payloads travel as camelCase JSON (``learningStyle``,
``correctOptionIndex``, ...). Request models also accept the snake_case
field names.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# REQUESTS
# =============================================================================

class GenerateStudyMaterialRequest(CamelModel):
    """Parameters for generating a study session."""
    topic: str = Field(..., min_length=1, max_length=500)
    format: str = Field(..., min_length=1, description="e.g. notes, summary, outline, flashcards")
    difficulty: str = Field(..., min_length=1, description="e.g. beginner, intermediate, advanced")
    learning_style: str = Field(..., min_length=1, description="e.g. visual, auditory, reading, kinesthetic")
    include_examples: bool = True
    include_visuals: bool = True
    subject: Optional[str] = None


class GenerateQuizRequest(CamelModel):
    """Parameters for generating a quiz."""
    session_id: Optional[int] = None
    topic: str = Field(..., min_length=1, max_length=500)
    subject: Optional[str] = None
    difficulty: str = Field(..., min_length=1)
    total_questions: int = Field(..., ge=1, le=20)


class SubmitQuizAnswerRequest(CamelModel):
    """An answer to one quiz question. ``answer`` is a zero-based option index."""
    quiz_id: int
    question_id: int
    answer: int


# =============================================================================
# MODEL OUTPUT
# =============================================================================

class GeneratedQuestion(CamelModel):
    """One question as returned by the generation service or the fallback tables."""
    question_text: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_option_index: int = Field(..., ge=0, le=3)
    explanation: str = ""


class GeneratedQuiz(CamelModel):
    questions: List[GeneratedQuestion] = Field(..., min_length=1)


# =============================================================================
# RESPONSES
# =============================================================================

class StudySessionResponse(CamelModel):
    id: int
    user_id: int
    topic: str
    subject: Optional[str] = None
    content: str
    format: str
    difficulty: str
    learning_style: str
    include_examples: bool
    include_visuals: bool
    created_at: datetime
    last_accessed: datetime


class QuizResponse(CamelModel):
    id: int
    user_id: int
    session_id: Optional[int] = None
    topic: str
    subject: Optional[str] = None
    difficulty: str
    total_questions: int
    completed: bool
    score: Optional[int] = None
    created_at: datetime


class QuizQuestionResponse(CamelModel):
    id: int
    quiz_id: int
    question_text: str
    options: List[str]
    correct_option_index: int
    explanation: Optional[str] = None
    user_answer: Optional[int] = None
    correct: Optional[bool] = None


class QuizWithQuestionsResponse(CamelModel):
    quiz: QuizResponse
    questions: List[QuizQuestionResponse]


class QuizResultsResponse(CamelModel):
    quiz: QuizResponse
    questions: List[QuizQuestionResponse]
    completed: bool
    score: Optional[int] = None
    state: str  # "created", "in_progress" or "completed"
