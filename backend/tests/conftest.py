import pytest

from memory.session_store import SessionStore
from interview.orchestrator import InterviewOrchestrator


SAMPLE_RESUME = (
    "Senior software engineer with 6+ years of experience. "
    "Built a real-time analytics platform with React, Node.js and PostgreSQL. "
    "Led a team of 4 engineers and owned the deployment pipeline on AWS with Docker. "
    "Used Jira and Jest daily."
)


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def orchestrator(store):
    return InterviewOrchestrator(store)
