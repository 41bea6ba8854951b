"""
Content Generation Service for StudyGen
Generates study notes and multiple-choice quizzes with OpenAI.

Neither public function raises: any failure of the generation call (missing
API key, network/API error, unparseable or empty response) is logged and
replaced with canned fallback content selected by subject.
"""

import os
import copy
import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from studygen.schemas.study import (
    GenerateQuizRequest,
    GenerateStudyMaterialRequest,
    GeneratedQuiz,
)
from studygen.services.fallback_content import (
    SAMPLE_QUIZZES,
    STUDY_INTRO_TEMPLATES,
    STUDY_MATERIALS,
)
from studygen.services.openai_service import openai_service
from studygen.services.subject_classifier import classify_fallback_subject

logger = logging.getLogger(__name__)

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "2000"))

STUDY_SYSTEM_PROMPT = (
    "You are an expert educational content creator who specializes in creating clear, "
    "accurate, and engaging study materials."
)

QUIZ_SYSTEM_PROMPT = (
    "You are an expert educational content creator who specializes in creating clear, "
    "accurate, and challenging quiz questions."
)

QUIZ_JSON_FORMAT = (
    '{ "questions": [{ "questionText": "...", "options": ["option1", "option2", '
    '"option3", "option4"], "correctOptionIndex": 0, "explanation": "..." }, ...] }'
)

UNAVAILABLE_STUDY_MATERIAL = "Unable to generate study material."


class QuizGenerationError(Exception):
    """Raised internally when a quiz response cannot be used."""
    pass


# =============================================================================
# PROMPTS
# =============================================================================

def build_study_prompt(request: GenerateStudyMaterialRequest) -> str:
    prompt = f'Create comprehensive {request.format} about "{request.topic}"'

    if request.subject:
        prompt += f" in the subject area of {request.subject}"

    prompt += (
        f". The content should be at a {request.difficulty} level and use a "
        f"{request.learning_style} learning style."
    )

    if request.include_examples:
        prompt += " Include practical examples to illustrate key concepts."

    if request.include_visuals:
        prompt += (
            " Describe any visual aids or diagrams that would be helpful "
            "(note: actual images won't be generated)."
        )

    prompt += " Format the output in markdown with appropriate headings, lists, and emphasis."
    return prompt


def build_quiz_prompt(request: GenerateQuizRequest) -> str:
    prompt = f'Create a quiz about "{request.topic}"'

    if request.subject:
        prompt += f" in the subject area of {request.subject}"

    prompt += (
        f". The quiz should have exactly {request.total_questions} multiple-choice "
        f"questions at a {request.difficulty} level."
    )
    prompt += (
        " For each question, provide four possible answers, clearly indicate which answer "
        "is correct (using a zero-based index, from 0 to 3), and provide a brief explanation "
        "for why the correct answer is right."
    )
    prompt += f" Return the response in JSON format with the following structure: {QUIZ_JSON_FORMAT}"
    return prompt


# =============================================================================
# STUDY MATERIAL
# =============================================================================

def generate_study_material(request: GenerateStudyMaterialRequest) -> str:
    """
    Generate markdown study notes for a topic.

    Returns:
        Markdown text, either generated or fallback
    """
    try:
        response = openai_service.chat_completion(
            messages=[
                {"role": "system", "content": STUDY_SYSTEM_PROMPT},
                {"role": "user", "content": build_study_prompt(request)},
            ],
            model=OPENAI_MODEL,
            temperature=OPENAI_TEMPERATURE,
            max_tokens=OPENAI_MAX_TOKENS,
        )
        return response.choices[0].message.content or UNAVAILABLE_STUDY_MATERIAL

    except Exception as e:
        logger.error("Error generating study material for %r: %s", request.topic, e)
        return fallback_study_material(request.topic, request.subject)


def fallback_study_material(topic: str, subject: str = None) -> str:
    """Canned notes for the topic's category, prefixed with a topic-specific introduction."""
    category = classify_fallback_subject(topic, subject)
    material = STUDY_MATERIALS.get(category, STUDY_MATERIALS["default"])

    intro = f"# {topic} - Study Material\n\n"
    intro += (
        f'_Note: This is sample content for "{topic}" (the generation service is unavailable). '
        f"The following material covers key concepts in {category}._\n\n"
    )
    intro += STUDY_INTRO_TEMPLATES.get(category, STUDY_INTRO_TEMPLATES["default"]).format(topic=topic)

    logger.info("Serving %s fallback study material for %r", category, topic)
    return intro + material


# =============================================================================
# QUIZZES
# =============================================================================

def parse_quiz_response(content: str, total_questions: int) -> List[Dict[str, Any]]:
    """
    Parse and validate the JSON body of a quiz completion.

    Raises:
        QuizGenerationError: If the content is missing, not JSON, or has no valid questions
    """
    if not content:
        raise QuizGenerationError("Empty response from generation service")

    try:
        payload = json.loads(content)
        quiz = GeneratedQuiz.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as e:
        raise QuizGenerationError(f"Failed to parse quiz questions: {e}") from e

    if len(quiz.questions) < total_questions:
        logger.warning(
            "Generation service returned %d of %d requested questions",
            len(quiz.questions), total_questions
        )

    return [q.model_dump(by_alias=True) for q in quiz.questions[:total_questions]]


def generate_quiz(request: GenerateQuizRequest) -> List[Dict[str, Any]]:
    """
    Generate multiple-choice questions for a topic.

    Returns:
        List of dicts with questionText, options, correctOptionIndex, explanation
    """
    try:
        response = openai_service.chat_completion(
            messages=[
                {"role": "system", "content": QUIZ_SYSTEM_PROMPT},
                {"role": "user", "content": build_quiz_prompt(request)},
            ],
            model=OPENAI_MODEL,
            response_format={"type": "json_object"},
            temperature=OPENAI_TEMPERATURE,
            max_tokens=OPENAI_MAX_TOKENS,
        )
        return parse_quiz_response(response.choices[0].message.content, request.total_questions)

    except Exception as e:
        logger.error("Error generating quiz for %r: %s", request.topic, e)
        return fallback_quiz(request.topic, request.total_questions, request.subject)


def fallback_quiz(topic: str, total_questions: int, subject: str = None) -> List[Dict[str, Any]]:
    """
    Canned questions for the topic's category, cut to the requested count.

    Only mathematics has its own set; every other category uses the default set.
    The first question is reworded to mention the topic.
    """
    category = classify_fallback_subject(topic, subject)
    questions = copy.deepcopy(SAMPLE_QUIZZES.get(category, SAMPLE_QUIZZES["default"]))
    questions = questions[:total_questions]

    if questions:
        first = questions[0]
        first["questionText"] = f"In the context of {topic}, {first['questionText'].lower()}"
        first["explanation"] += (
            f" (Note: This is a sample question related to {topic} provided because "
            f"the generation service was unavailable)"
        )

    logger.info("Serving %d fallback quiz questions (%s) for %r", len(questions), category, topic)
    return questions
