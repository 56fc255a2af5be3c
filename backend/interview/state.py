"""
Interview state machine for managing interview flow.
Tracks the phase, the question cursor within the phase and the answer log.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from models.schemas import (
    InterviewPhase,
    InterviewSession,
    AnswerRecord,
    ResumeAnalysis,
)
from interview.errors import InterviewInternalError
from interview.phases import InterviewPhases

logger = logging.getLogger(__name__)


class InterviewStateMachine:
    """
    Manages the state of one interview session.

    The phase only moves forward (technical -> behavioral -> complete).
    `current_question_index` always points into the current phase's list and
    is reset to 0 once, when the behavioral phase begins.
    """

    def __init__(
        self,
        session_id: str,
        resume: str,
        job_role: str,
        resume_analysis: ResumeAnalysis,
        technical_questions: Sequence[str],
        behavioral_questions: Sequence[str],
    ):
        """
        Initialize a new interview state machine.

        Args:
            session_id: Caller-chosen session id
            resume: Resume text, fixed for the session
            job_role: The job role being interviewed for
            resume_analysis: Signals extracted from the resume
            technical_questions: Questions for the technical phase
            behavioral_questions: Questions for the behavioral phase
        """
        self.session_id = session_id
        self.resume = resume
        self.job_role = job_role
        self.resume_analysis = resume_analysis
        self.technical_questions: Tuple[str, ...] = tuple(technical_questions)
        self.behavioral_questions: Tuple[str, ...] = tuple(behavioral_questions)

        self.phase = InterviewPhase.TECHNICAL
        self.current_question_index = 0
        self.answers: List[AnswerRecord] = []

    # ========================================
    # Question cursor
    # ========================================

    def questions_for(self, phase: InterviewPhase) -> Tuple[str, ...]:
        if phase == InterviewPhase.TECHNICAL:
            return self.technical_questions
        if phase == InterviewPhase.BEHAVIORAL:
            return self.behavioral_questions
        return ()

    def current_question(self) -> Optional[str]:
        """The question awaiting an answer, or None once the interview is complete."""
        questions = self.questions_for(self.phase)
        if self.current_question_index < len(questions):
            return questions[self.current_question_index]
        return None

    @property
    def is_complete(self) -> bool:
        return self.phase == InterviewPhase.COMPLETE

    # ========================================
    # Answer recording and phase transitions
    # ========================================

    def record_answer(self, answer: str) -> Optional[str]:
        """
        Record an answer to the current question and advance the cursor.

        Args:
            answer: The candidate's answer text

        Returns:
            The next question to ask, or None when the interview is complete
        """
        question = self.current_question()
        if question is None:
            raise InterviewInternalError(
                f"No open question for session {self.session_id} in phase {self.phase.value}"
            )

        self.answers.append(AnswerRecord(question=question, answer=answer, type=self.phase))
        self.current_question_index += 1

        if self.current_question_index >= len(self.questions_for(self.phase)):
            self._transition_to_next_phase()

        return self.current_question()

    def _transition_to_next_phase(self) -> None:
        """Move to the next phase, skipping any phase with no questions."""
        next_phase = InterviewPhases.get_next_phase(self.phase)
        logger.info(f"Session {self.session_id}: {self.phase.value} -> {next_phase.value}")
        self.phase = next_phase
        if next_phase == InterviewPhase.COMPLETE:
            return

        self.current_question_index = 0
        if not self.questions_for(next_phase):
            self._transition_to_next_phase()

    def answers_for(self, phase: InterviewPhase) -> List[AnswerRecord]:
        return [record for record in self.answers if record.type == phase]

    # ========================================
    # Serialization
    # ========================================

    def to_session(self) -> InterviewSession:
        """Convert state machine to InterviewSession model."""
        return InterviewSession(
            session_id=self.session_id,
            resume=self.resume,
            job_role=self.job_role,
            phase=self.phase,
            current_question_index=self.current_question_index,
            answers=list(self.answers),
            resume_analysis=self.resume_analysis,
            technical_questions=self.technical_questions,
            behavioral_questions=self.behavioral_questions,
        )

