"""
Hiring committee moderation: turns scores, resume signals and contradictions
into the final verdict and its narrative.
"""
import logging
from typing import Any, Dict, List, Sequence

from models.schemas import AnswerRecord, FinalReport, ResumeAnalysis, StructuredReport
from utils.matching import PatternMatcher

logger = logging.getLogger(__name__)


STRONG = "Strong"
MODERATE = "Moderate"
QUESTIONABLE = "Questionable"

STRONG_HIRE = "Strong Hire"
HIRE = "Hire"
BORDERLINE = "Borderline"
NO_HIRE = "No Hire"

# Authenticity thresholds (strictly greater than)
QUESTIONABLE_CONTRADICTIONS = 2
QUESTIONABLE_EXAGGERATIONS = 3
MODERATE_CONTRADICTIONS = 0
MODERATE_EXAGGERATIONS = 1

STRENGTH_SCORE = 7
WEAKNESS_SCORE = 5
DETAILED_ANSWER_WORDS = 30
EXAGGERATION_FLAG_COUNT = 2
VAGUE_FLAG_COUNT = 3
MAX_RED_FLAGS = 2

STRONG_HIRE_SCORE = 8
HIRE_SCORE = 6

CONSISTENCY_BASE = 10
CONTRADICTION_PENALTY = 2
HIGH_CONFIDENCE = 8
MEDIUM_CONFIDENCE = 6

IMPROVEMENT_ACTIONS = [
    ("technical", "Focus on deepening technical knowledge through hands-on projects and courses"),
    ("communication", "Practice explaining technical concepts clearly and with specific examples"),
    ("detail", "Provide more specific examples and metrics in responses"),
]
DEFAULT_IMPROVEMENT = "Work on providing structured reasoning for technical decisions"

TECHNICAL_SUMMARIES = [
    (7, "Strong technical foundation with good problem-solving abilities."),
    (5, "Decent technical knowledge but room for improvement."),
    (float("-inf"), "Technical skills need significant development."),
]

BEHAVIORAL_SUMMARIES = [
    (7, "Excellent communication skills and professional demeanor."),
    (5, "Good communication but could be more articulate."),
    (float("-inf"), "Communication skills need substantial improvement."),
]

AUTHENTICITY_SUMMARIES = {
    STRONG: "Resume claims appear consistent and believable.",
    MODERATE: "Some claims may be exaggerated or need verification.",
    QUESTIONABLE: "Multiple inconsistencies found in resume claims.",
}

RECOMMENDATION_SUMMARIES = {
    STRONG_HIRE: "Candidate exceeds requirements and would be a valuable addition.",
    HIRE: "Candidate meets requirements and would perform well in the role.",
    BORDERLINE: "Candidate has potential but needs development in key areas.",
    NO_HIRE: "Candidate does not meet current requirements.",
}

REPORT_TEMPLATE = """
📊 FINAL CANDIDATE REPORT

Technical Performance: {technical_score}/10
{technical_summary}

Behavioral & Communication: {behavioral_score}/10
{behavioral_summary}

Resume Authenticity Assessment: {authenticity}
{authenticity_summary}

Strengths:
{strengths}

Areas for Improvement:
{weaknesses}

{red_flags}

Improvement Plan:
{improvement_plan}

Final Hiring Recommendation: {recommendation}
{recommendation_summary}

Confidence Level: {confidence}
"""


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def _tier(score: float, tiers: List[tuple]) -> str:
    for threshold, text in tiers:
        if score >= threshold:
            return text
    return tiers[-1][1]


class ReportAggregator:
    """
    Generates the final interview report and hiring recommendation.
    """

    @classmethod
    def generate(
        cls,
        technical_score: float,
        behavioral_score: float,
        analysis: ResumeAnalysis,
        contradictions: List[str],
        answers: Sequence[AnswerRecord],
    ) -> FinalReport:
        """
        Build the final report.

        Args:
            technical_score: Mean technical score (0-10)
            behavioral_score: Mean behavioral score (0-10)
            analysis: Resume signals captured at interview start
            contradictions: Output of the contradiction detector
            answers: Every recorded answer, both phases

        Returns:
            FinalReport with structured fields and narrative
        """
        authenticity = cls.assess_authenticity(analysis, contradictions)
        strengths = cls.identify_strengths(technical_score, behavioral_score, answers)
        weaknesses = cls.identify_weaknesses(technical_score, behavioral_score, answers)
        red_flags = cls.identify_red_flags(contradictions, analysis)
        improvement_plan = cls.improvement_plan(weaknesses)
        recommendation = cls.recommend(technical_score, behavioral_score, authenticity, red_flags)
        confidence = cls.confidence(technical_score, behavioral_score, len(contradictions))

        structured = StructuredReport(
            technical_score=technical_score,
            behavioral_score=behavioral_score,
            resume_authenticity=authenticity,
            strengths=strengths,
            weaknesses=weaknesses,
            red_flags=red_flags,
            improvement_plan=improvement_plan,
            hiring_recommendation=recommendation,
            confidence_level=confidence,
        )

        logger.info(
            f"Verdict: {recommendation} (technical={technical_score:.2f}, "
            f"behavioral={behavioral_score:.2f}, authenticity={authenticity}, confidence={confidence})"
        )

        return FinalReport(human_readable=cls.render(structured), structured=structured)

    @staticmethod
    def assess_authenticity(analysis: ResumeAnalysis, contradictions: List[str]) -> str:
        exaggerations = len(analysis.exaggerations)
        if len(contradictions) > QUESTIONABLE_CONTRADICTIONS or exaggerations > QUESTIONABLE_EXAGGERATIONS:
            return QUESTIONABLE
        if len(contradictions) > MODERATE_CONTRADICTIONS or exaggerations > MODERATE_EXAGGERATIONS:
            return MODERATE
        return STRONG

    @staticmethod
    def identify_strengths(
        technical_score: float,
        behavioral_score: float,
        answers: Sequence[AnswerRecord],
    ) -> List[str]:
        strengths = []
        if technical_score >= STRENGTH_SCORE:
            strengths.append("Strong technical knowledge and problem-solving skills")
        if behavioral_score >= STRENGTH_SCORE:
            strengths.append("Excellent communication and behavioral responses")
        if any(PatternMatcher.contains_any(a.answer, ["lead", "managed"]) for a in answers):
            strengths.append("Leadership experience and ownership")
        if any(PatternMatcher.contains_any(a.answer, ["learn", "improved"]) for a in answers):
            strengths.append("Growth mindset and continuous learning")
        return strengths

    @staticmethod
    def identify_weaknesses(
        technical_score: float,
        behavioral_score: float,
        answers: Sequence[AnswerRecord],
    ) -> List[str]:
        weaknesses = []
        if technical_score < WEAKNESS_SCORE:
            weaknesses.append("Technical depth needs improvement")
        if behavioral_score < WEAKNESS_SCORE:
            weaknesses.append("Communication clarity could be enhanced")
        if any(PatternMatcher.word_count(a.answer) < DETAILED_ANSWER_WORDS for a in answers):
            weaknesses.append("Answers lack sufficient detail and examples")
        if any(not PatternMatcher.contains_any(a.answer, ["because", "therefore"]) for a in answers):
            weaknesses.append("Need to provide more reasoning for decisions")
        return weaknesses

    @staticmethod
    def identify_red_flags(contradictions: List[str], analysis: ResumeAnalysis) -> List[str]:
        red_flags = list(contradictions)
        if len(analysis.exaggerations) > EXAGGERATION_FLAG_COUNT:
            red_flags.append("Multiple exaggerated claims in resume")
        if len(analysis.vague_statements) > VAGUE_FLAG_COUNT:
            red_flags.append("Excessive vague statements in resume")
        return red_flags

    @staticmethod
    def improvement_plan(weaknesses: List[str]) -> List[str]:
        plan = []
        for weakness in weaknesses:
            lowered = weakness.lower()
            action = next(
                (text for keyword, text in IMPROVEMENT_ACTIONS if keyword in lowered),
                DEFAULT_IMPROVEMENT,
            )
            plan.append(action)
        return plan

    @staticmethod
    def recommend(
        technical_score: float,
        behavioral_score: float,
        authenticity: str,
        red_flags: List[str],
    ) -> str:
        overall = (technical_score + behavioral_score) / 2
        if authenticity == QUESTIONABLE or len(red_flags) > MAX_RED_FLAGS:
            return NO_HIRE
        if overall >= STRONG_HIRE_SCORE and authenticity == STRONG:
            return STRONG_HIRE
        if overall >= HIRE_SCORE and authenticity != QUESTIONABLE:
            return HIRE
        return BORDERLINE

    @staticmethod
    def confidence(technical_score: float, behavioral_score: float, contradiction_count: int) -> str:
        consistency = CONSISTENCY_BASE - CONTRADICTION_PENALTY * contradiction_count
        average = (technical_score + behavioral_score + consistency) / 3
        if average >= HIGH_CONFIDENCE:
            return "High"
        if average >= MEDIUM_CONFIDENCE:
            return "Medium"
        return "Low"

    @staticmethod
    def render(report: StructuredReport) -> str:
        """Fixed-layout narrative. Consumers parse it, so the layout must not drift."""
        red_flags = ""
        if report.red_flags:
            red_flags = f"Red Flags:\n{_bullets(report.red_flags)}\n"

        fields: Dict[str, Any] = {
            "technical_score": PatternMatcher.format_number(report.technical_score),
            "technical_summary": _tier(report.technical_score, TECHNICAL_SUMMARIES),
            "behavioral_score": PatternMatcher.format_number(report.behavioral_score),
            "behavioral_summary": _tier(report.behavioral_score, BEHAVIORAL_SUMMARIES),
            "authenticity": report.resume_authenticity,
            "authenticity_summary": AUTHENTICITY_SUMMARIES[report.resume_authenticity],
            "strengths": _bullets(report.strengths),
            "weaknesses": _bullets(report.weaknesses),
            "red_flags": red_flags,
            "improvement_plan": _bullets(report.improvement_plan),
            "recommendation": report.hiring_recommendation,
            "recommendation_summary": RECOMMENDATION_SUMMARIES[report.hiring_recommendation],
            "confidence": report.confidence_level,
        }
        return REPORT_TEMPLATE.format(**fields).strip()
