"""
Pytest configuration and fixtures for StudyGen backend tests.

Provides:
- Test database setup/teardown
- FastAPI test client acting as the seeded demo user
- Study session, quiz and question fixtures
- OpenAI mocks for generation tests
"""

import pytest
import os
import json
from typing import Generator, Dict, Any, List
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test_studygen.db"
os.environ["OPENAI_API_KEY"] = ""  # Generation unavailable unless a test mocks it
os.environ["SEED_DEMO_USER"] = "false"

from studygen.main import app
from studygen.database import Base, get_db
from studygen.dependencies.auth import seed_demo_user
from studygen.models.models import User, StudySession, Quiz, QuizQuestion
from studygen.services import storage
from studygen.services.openai_service import openai_service


# Test database setup
TEST_DATABASE_URL = "sqlite:///./test_studygen.db"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database tables once per test session"""
    Base.metadata.create_all(bind=test_engine)
    yield
    # Cleanup after all tests
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()
    # Remove test database file
    if os.path.exists("./test_studygen.db"):
        os.remove("./test_studygen.db")


@pytest.fixture(autouse=True)
def reset_openai_client():
    """Never let a cached client leak between tests"""
    openai_service.reset_client()
    yield
    openai_service.reset_client()


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Provide a database session for each test, with rollback after"""
    connection = test_engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


def _client_for(db: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(db: Session, demo_user: User) -> Generator[TestClient, None, None]:
    """Provide FastAPI test client with database override and a seeded demo user"""
    yield from _client_for(db)


@pytest.fixture(scope="function")
def unseeded_client(db: Session) -> Generator[TestClient, None, None]:
    """Test client against a database with no demo user"""
    yield from _client_for(db)


# =========================================================================
# User Fixtures
# =========================================================================

@pytest.fixture
def demo_user(db: Session) -> User:
    """The seeded demo account"""
    return seed_demo_user(db)


# =========================================================================
# Study Session / Quiz Fixtures
# =========================================================================

@pytest.fixture
def sample_questions() -> List[Dict[str, Any]]:
    """Three generated questions, correct answers at index 0, 1 and 2"""
    return [
        {
            "questionText": "What do plants absorb during photosynthesis?",
            "options": ["Carbon dioxide", "Oxygen", "Nitrogen", "Helium"],
            "correctOptionIndex": 0,
            "explanation": "Plants take in carbon dioxide and release oxygen.",
        },
        {
            "questionText": "Where does photosynthesis take place?",
            "options": ["Mitochondria", "Chloroplasts", "Nucleus", "Ribosomes"],
            "correctOptionIndex": 1,
            "explanation": "Chloroplasts hold the chlorophyll that captures light.",
        },
        {
            "questionText": "Which pigment captures light energy?",
            "options": ["Melanin", "Keratin", "Chlorophyll", "Hemoglobin"],
            "correctOptionIndex": 2,
            "explanation": "Chlorophyll absorbs mostly red and blue light.",
        },
    ]


@pytest.fixture
def test_study_session(db: Session, demo_user: User) -> StudySession:
    """Create a study session owned by the demo user"""
    return storage.create_study_session(
        db,
        user_id=demo_user.id,
        topic="Photosynthesis",
        subject="Biology",
        content="# Photosynthesis\n\nPlants turn light into chemical energy.",
        format="notes",
        difficulty="beginner",
        learning_style="visual",
    )


@pytest.fixture
def test_quiz(db: Session, demo_user: User, sample_questions: List[Dict[str, Any]]) -> Quiz:
    """Create an unanswered three-question quiz"""
    quiz = storage.create_quiz(
        db,
        user_id=demo_user.id,
        topic="Photosynthesis",
        subject="Biology",
        difficulty="beginner",
        total_questions=len(sample_questions),
    )
    storage.create_quiz_questions(db, quiz.id, sample_questions)
    return quiz


@pytest.fixture
def test_quiz_questions(db: Session, test_quiz: Quiz) -> List[QuizQuestion]:
    return storage.get_quiz_questions_by_quiz_id(db, test_quiz.id)


# =========================================================================
# Mock Fixtures
# =========================================================================

def _mock_client(content: str) -> MagicMock:
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content

    mock_instance = MagicMock()
    mock_instance.chat.completions.create.return_value = mock_response
    return mock_instance


@pytest.fixture
def mock_openai():
    """Mock OpenAI API calls for testing without API costs"""
    mock_instance = _mock_client("# Mocked study notes")

    with patch.object(openai_service, '_client', mock_instance):
        yield mock_instance


@pytest.fixture
def mock_openai_quiz(sample_questions: List[Dict[str, Any]]):
    """Mock OpenAI to return a valid quiz payload"""
    mock_instance = _mock_client(json.dumps({"questions": sample_questions}))

    with patch.object(openai_service, '_client', mock_instance):
        yield mock_instance


@pytest.fixture
def mock_openai_failure():
    """Mock OpenAI to fail every call"""
    mock_instance = MagicMock()
    mock_instance.chat.completions.create.side_effect = Exception("Service unavailable")

    with patch.object(openai_service, '_client', mock_instance):
        yield mock_instance
