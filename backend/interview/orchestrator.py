"""
Interview orchestration.
Coordinates the resume extractor, question generator, scorer, contradiction
detector and report aggregator, and owns all writes to the session store.
"""
import logging
from typing import Any, Dict, Optional

from models.schemas import FinalReport, InterviewPhase
from memory.extractors import ResumeSignalExtractor, resume_extractor
from memory.session_store import SessionStore, session_store
from interview.contradictions import ContradictionDetector
from interview.questions import QuestionGenerator
from interview.report import ReportAggregator
from interview.scoring import AnswerScorer
from interview.state import InterviewStateMachine
from utils.config import config

logger = logging.getLogger(__name__)


class InterviewOrchestrator:
    """
    Drives an interview from start to final report.
    Every operation on a session runs under that session's lock.
    """

    def __init__(
        self,
        store: SessionStore,
        extractor: Optional[ResumeSignalExtractor] = None,
    ):
        self.store = store
        self.extractor = extractor or resume_extractor

    def start(self, session_id: str, resume: str, job_role: str) -> Dict[str, Any]:
        """
        Start (or restart) an interview session.

        Args:
            session_id: Caller-chosen session id; an existing session is replaced
            resume: Resume text
            job_role: The job role

        Returns:
            Greeting and the first technical question
        """
        analysis = self.extractor.analyze(resume, job_role)
        session = InterviewStateMachine(
            session_id=session_id,
            resume=resume,
            job_role=job_role,
            resume_analysis=analysis,
            technical_questions=QuestionGenerator.technical_questions(analysis, job_role),
            behavioral_questions=QuestionGenerator.behavioral_questions(),
        )

        with self.store.locked(session_id):
            self.store.create(session)

        logger.info(f"Started session {session_id} for role '{job_role}'")

        return {
            "message": config.interview.greeting(job_role),
            "firstQuestion": session.current_question(),
            "questionType": session.phase.value,
        }

    def answer(self, session_id: str, answer: str) -> Dict[str, Any]:
        """
        Record an answer and return the next question or the final report.

        Raises:
            SessionNotFoundError: if the session does not exist
        """
        with self.store.locked(session_id):
            session = self.store.get(session_id)
            next_question = session.record_answer(answer)
            self.store.update(session)

            if session.is_complete:
                report = self._finalize(session)
                return {"complete": True, "report": report.to_response()}

        return {
            "nextQuestion": next_question,
            "questionType": session.phase.value,
        }

    def _finalize(self, session: InterviewStateMachine) -> FinalReport:
        """Score every answer, aggregate the verdict and drop the session."""
        technical_score = AnswerScorer.mean(
            [
                AnswerScorer.score_technical(record.question, record.answer)
                for record in session.answers_for(InterviewPhase.TECHNICAL)
            ],
            label="technical scores",
        )
        behavioral_score = AnswerScorer.mean(
            [
                AnswerScorer.score_behavioral(record.answer)
                for record in session.answers_for(InterviewPhase.BEHAVIORAL)
            ],
            label="behavioral scores",
        )

        contradictions = ContradictionDetector.detect(session.resume, session.answers)

        report = ReportAggregator.generate(
            technical_score=technical_score,
            behavioral_score=behavioral_score,
            analysis=session.resume_analysis,
            contradictions=contradictions,
            answers=session.answers,
        )

        self.store.delete(session.session_id)
        logger.info(f"Session {session.session_id} complete, state deleted")
        return report


# Global orchestrator instance
interview_orchestrator = InterviewOrchestrator(session_store)
