"""
Pydantic models shared across the interview engine.
Covers session state snapshots, resume signals, reports and API payloads.
"""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InterviewPhase(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    COMPLETE = "complete"

    @classmethod
    def get_order(cls) -> List["InterviewPhase"]:
        """Phases that ask questions, in interview order."""
        return [cls.TECHNICAL, cls.BEHAVIORAL]


class AnswerRecord(BaseModel):
    """One question/answer exchange, tagged with the phase it was asked in."""
    question: str
    answer: str
    type: InterviewPhase


class ResumeAnalysis(BaseModel):
    """Signals pattern-matched out of a resume. Immutable once produced, lists included."""
    model_config = ConfigDict(frozen=True)

    skills: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    claimed_ownership: Tuple[str, ...] = ()
    years_experience: int = 0
    strong_claims: Tuple[str, ...] = ()
    vague_statements: Tuple[str, ...] = ()
    exaggerations: Tuple[str, ...] = ()
    mismatches: Tuple[str, ...] = ()


class CommunicationScores(BaseModel):
    clarity: int  # 0-10
    confidence: int  # 0-10
    honesty: int  # 0-10

    @property
    def average(self) -> float:
        return (self.clarity + self.confidence + self.honesty) / 3


class InterviewSession(BaseModel):
    """Read-only snapshot of an interview in progress."""
    session_id: str
    resume: str
    job_role: str
    phase: InterviewPhase
    current_question_index: int
    answers: List[AnswerRecord]
    resume_analysis: ResumeAnalysis
    technical_questions: Tuple[str, ...]
    behavioral_questions: Tuple[str, ...]


class StructuredReport(BaseModel):
    technical_score: float
    behavioral_score: float
    resume_authenticity: str
    strengths: List[str]
    weaknesses: List[str]
    red_flags: List[str]
    improvement_plan: List[str]
    hiring_recommendation: str
    confidence_level: str


class FinalReport(BaseModel):
    """Terminal verdict: structured fields plus the rendered narrative."""
    model_config = ConfigDict(populate_by_name=True)

    human_readable: str = Field(alias="humanReadable")
    structured: StructuredReport

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


class InterviewRequest(BaseModel):
    """Body of POST /api/ai-interview. Field presence is checked per action."""
    action: Optional[str] = None
    sessionId: Optional[str] = None
    resume: Optional[str] = None
    jobRole: Optional[str] = None
    answer: Optional[str] = None
