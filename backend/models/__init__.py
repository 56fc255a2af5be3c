# Data models
from .schemas import (
    InterviewPhase,
    AnswerRecord,
    ResumeAnalysis,
    CommunicationScores,
    InterviewSession,
    StructuredReport,
    FinalReport,
    InterviewRequest,
)
