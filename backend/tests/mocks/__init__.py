"""
Mock infrastructure for StudyGen testing.
Provides deterministic mocks for OpenAI.
"""

from .openai_mocks import (
    MOCK_STUDY_NOTES,
    MOCK_QUIZ_RESPONSE,
    MockOpenAIClient,
    MockChatCompletion,
    mock_openai_completion,
)

__all__ = [
    "MOCK_STUDY_NOTES",
    "MOCK_QUIZ_RESPONSE",
    "MockOpenAIClient",
    "MockChatCompletion",
    "mock_openai_completion",
]
