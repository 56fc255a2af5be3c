"""
AI Interviewer - FastAPI Backend

Scripted resume-driven interview with deterministic evaluation:
- Resume signal extraction
- Resume-tailored technical questions and fixed behavioral questions
- Heuristic answer scoring and contradiction detection
- Hiring committee report with recommendation and confidence
"""
import sys
import os
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from utils.config import config
from models.schemas import InterviewRequest
from interview.errors import InterviewError, InterviewInternalError, InvalidRequestError
from interview.orchestrator import interview_orchestrator
from interview.phases import InterviewPhases

logging.basicConfig(level=config.logging.level, format=config.logging.format)
logger = logging.getLogger(__name__)

# ================================================================
# FastAPI App Initialization
# ================================================================

app = FastAPI(
    title="AI Interviewer API",
    description="Resume-driven technical interview with deterministic evaluation",
    version=config.interview.version
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ================================================================
# Error Handling
# ================================================================


@app.exception_handler(InterviewError)
async def interview_error_handler(request: Request, exc: InterviewError):
    """Render interview errors as {"error": message} with the mapped status."""
    message = exc.message
    if exc.status_code >= 500:
        logger.error(f"Interview failed: {exc.message}")
        message = "Internal server error"
    return JSONResponse(status_code=exc.status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed request: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def _require(request: InterviewRequest, fields: List[str]) -> None:
    """Raise if any of `fields` is missing or blank."""
    missing = []
    for name in fields:
        value = getattr(request, name)
        if value is None or (name != "answer" and not value.strip()):
            missing.append(name)
    if missing:
        raise InvalidRequestError(f"Missing required fields: {', '.join(missing)}")


# ================================================================
# API Endpoints
# ================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "running",
        "version": config.interview.version,
        "service": config.interview.service_name,
        "active_sessions": interview_orchestrator.store.count(),
        "phases": InterviewPhases.describe(),
        "total_questions": InterviewPhases.total_questions(),
    }


@app.post("/api/ai-interview")
async def ai_interview(request: InterviewRequest) -> Dict[str, Any]:
    """
    Single interview endpoint.

    Actions:
        start: {sessionId, resume, jobRole} -> greeting and first question
        answer: {sessionId, answer} -> next question, or the final report
    """
    if request.action == "start":
        _require(request, ["sessionId", "resume", "jobRole"])
        return _run(interview_orchestrator.start, request.sessionId, request.resume, request.jobRole)

    if request.action == "answer":
        _require(request, ["sessionId", "answer"])
        return _run(interview_orchestrator.answer, request.sessionId, request.answer)

    raise InvalidRequestError("Invalid action")


def _run(operation, *args) -> Dict[str, Any]:
    """Call an orchestrator operation, turning unexpected failures into a 500."""
    try:
        return operation(*args)
    except InterviewError:
        raise
    except Exception as e:
        logger.exception(f"Interview API error: {e}")
        raise InterviewInternalError(str(e)) from e


# ================================================================
# Main Entry Point
# ================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.server.host, port=config.server.port)
