# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import os
import logging
import sentry_sdk
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from studygen.database import engine, Base, SessionLocal
from studygen.dependencies.auth import seed_demo_user
from studygen.routers import study_sessions, quizzes
from studygen.services.openai_service import openai_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error monitoring
sentry_dsn = os.getenv("SENTRY_DSN")
if sentry_dsn:
    sentry_sdk.init(
        dsn=sentry_dsn,
        traces_sample_rate=0.1,
        environment=os.getenv("ENVIRONMENT", "development"),
    )

# Create database tables
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # STARTUP: make sure the demo account exists
    if os.getenv("SEED_DEMO_USER", "true").lower() == "true":
        db = SessionLocal()
        try:
            user = seed_demo_user(db)
            logger.info("Demo user ready (id=%s)", user.id)
        finally:
            db.close()
    else:
        logger.info("Demo user seeding disabled via SEED_DEMO_USER=false")

    yield  # Application runs here

    logger.info("Shutting down...")


tags_metadata = [
    {
        "name": "study-sessions",
        "description": "Generate, list, open and delete AI-written study notes.",
    },
    {
        "name": "quizzes",
        "description": "Generate multiple-choice quizzes, submit answers and read results.",
    },
]

app = FastAPI(
    title="StudyGen API",
    description="""
## StudyGen Study-Aid Backend

Generates study notes and quizzes for any topic with OpenAI, stores them, and
grades quiz answers. When the generation service is unavailable, canned
content for the closest subject is served instead.
    """,
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=tags_metadata,
)

ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
]

# Allow additional origins from environment
extra_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
if extra_origins:
    ALLOWED_ORIGINS.extend([o.strip() for o in extra_origins.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# Include routers
app.include_router(study_sessions.router)
app.include_router(quizzes.router)


@app.get("/")
def root():
    return {
        "message": "StudyGen API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "generation": openai_service.get_status()
    }
