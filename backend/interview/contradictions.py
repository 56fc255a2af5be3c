"""
Cross-checks interview answers against the resume.
"""
import logging
from typing import List, Sequence

from models.schemas import AnswerRecord
from utils.matching import PatternMatcher

logger = logging.getLogger(__name__)


REFERENCE_SKILLS = ["React", "Node.js", "Python", "JavaScript", "TypeScript", "AWS", "Docker"]
EXPERIENCE_QUESTION_TERMS = ["experience", "years"]
MAX_YEARS_DRIFT = 2


class ContradictionDetector:
    """
    Flags experience and skill claims that an answer fails to back up.
    Output is one description per offending answer and check; nothing is deduplicated.
    """

    @classmethod
    def detect(cls, resume: str, answers: Sequence[AnswerRecord]) -> List[str]:
        contradictions: List[str] = []
        resume_skills = cls.skills_in(resume)

        for record in answers:
            if PatternMatcher.contains_any(record.question, EXPERIENCE_QUESTION_TERMS):
                mismatch = cls.experience_mismatch(resume, record.answer)
                if mismatch:
                    contradictions.append(mismatch)

            missing = cls.missing_skills(resume_skills, record.question, record.answer)
            if missing:
                contradictions.append(
                    f"Skill contradiction: Resume mentions {', '.join(missing)} but answer lacks detail"
                )

        if contradictions:
            logger.debug(f"Detected {len(contradictions)} contradictions")
        return contradictions

    @staticmethod
    def skills_in(text: str) -> List[str]:
        """Reference skills named anywhere in the text."""
        return [skill for skill in REFERENCE_SKILLS if PatternMatcher.contains_any(text, [skill])]

    @staticmethod
    def experience_mismatch(resume: str, answer: str) -> str:
        """Description of a years-of-experience disagreement, or "" if they agree."""
        resume_years = PatternMatcher.first_years(resume)
        answer_years = PatternMatcher.first_years(answer)
        if abs(resume_years - answer_years) > MAX_YEARS_DRIFT:
            return (
                f"Experience mismatch: Resume claims {resume_years} years, "
                f"answer suggests {answer_years} years"
            )
        return ""

    @classmethod
    def missing_skills(cls, resume_skills: List[str], question: str, answer: str) -> List[str]:
        """Resume skills the question asks about that the answer never mentions."""
        answer_skills = cls.skills_in(answer)
        return [
            skill for skill in resume_skills
            if PatternMatcher.contains_any(question, [skill])
            and not any(skill.lower() in found.lower() for found in answer_skills)
        ]
