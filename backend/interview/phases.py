"""
Phase table for the scripted interview.
Questioning runs technical -> behavioral, then the session is complete.
"""
from typing import Any, Dict, List
from dataclasses import dataclass

from models.schemas import InterviewPhase


@dataclass
class PhaseInfo:
    """One questioning stage and what it probes."""
    phase: InterviewPhase
    question_count: int
    description: str
    focus_areas: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "question_count": self.question_count,
            "description": self.description,
            "focus_areas": self.focus_areas,
        }


PHASE_ORDER = InterviewPhase.get_order()


class InterviewPhases:
    """
    Static lookup over the questioning stages.
    """

    PHASES: Dict[InterviewPhase, PhaseInfo] = {
        InterviewPhase.TECHNICAL: PhaseInfo(
            phase=InterviewPhase.TECHNICAL,
            question_count=5,
            description="Technical depth probing built from resume signals",
            focus_areas=["skills", "projects", "tools", "experience", "problem-solving"],
        ),
        InterviewPhase.BEHAVIORAL: PhaseInfo(
            phase=InterviewPhase.BEHAVIORAL,
            question_count=5,
            description="Past behavior and communication",
            focus_areas=["conflict", "teamwork", "learning", "leadership", "accountability"],
        ),
    }

    @classmethod
    def get_next_phase(cls, current: InterviewPhase) -> InterviewPhase:
        """
        Phase that follows `current`.

        COMPLETE follows the last questioning phase and is terminal.
        """
        if current not in PHASE_ORDER:
            return InterviewPhase.COMPLETE
        position = PHASE_ORDER.index(current) + 1
        return PHASE_ORDER[position] if position < len(PHASE_ORDER) else InterviewPhase.COMPLETE

    @classmethod
    def total_questions(cls) -> int:
        return sum(info.question_count for info in cls.PHASES.values())

    @classmethod
    def describe(cls) -> List[Dict[str, Any]]:
        """Phase table in asking order, for the health endpoint."""
        return [cls.PHASES[phase].to_dict() for phase in PHASE_ORDER]
