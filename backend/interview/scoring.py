"""
Answer scoring and evaluation system.
Technical answers get a depth score; behavioral answers get three
communication dimensions. All scores are integers clamped to 0-10.
"""
import logging
from typing import List, Sequence, Tuple

from models.schemas import CommunicationScores
from utils.matching import PatternMatcher

logger = logging.getLogger(__name__)


MIN_SCORE = 0
MAX_SCORE = 10
BASE_SCORE = 5

# Technical depth
SHORT_ANSWER_WORDS = 20  # fewer words than this is penalized
LONG_ANSWER_WORDS = 100  # more words than this is rewarded
SHORT_ANSWER_PENALTY = -2
LONG_ANSWER_BONUS = 2
TECHNICAL_TERMS = ["algorithm", "architecture", "optimization", "scalability", "performance", "security"]
MAX_TECHNICAL_TERM_BONUS = 2
METRIC_BONUS = 1
EXAMPLE_TERMS = ["example", "project"]
EXAMPLE_BONUS = 1
PROBLEM_SOLVING_TERMS = ["challenge", "problem", "solution", "fixed", "improved", "optimized"]
MAX_PROBLEM_SOLVING_BONUS = 1

# Communication rules: (phrases, delta). A rule fires once if any phrase is present.
STRUCTURE_WORDS = ["First", "Then", "Finally"]  # matched case-sensitively
STRUCTURE_BONUS = 1
MIN_SENTENCE_PARTS = 3  # more period-separated parts than this is rewarded
MULTI_SENTENCE_BONUS = 1

CLARITY_RULES: List[Tuple[Sequence[str], int]] = [
    (["specifically", "for example"], 1),
    (["because", "therefore"], 1),
    (["something", "anything"], -1),
    (["stuff", "things"], -1),
]

CONFIDENCE_RULES: List[Tuple[Sequence[str], int]] = [
    (["I believe", "I think"], 1),
    (["I know", "I'm confident"], 2),
    (["I did", "I created"], 1),
    (["my responsibility", "I led"], 1),
    (["maybe", "perhaps"], -1),
    (["not sure", "I guess"], -2),
]

HONESTY_RULES: List[Tuple[Sequence[str], int]] = [
    (["mistake", "error"], 2),
    (["learned", "improved"], 1),
    (["admit", "realize"], 1),
    (["perfect", "always"], -1),
    (["never", "best"], -1),
]


def clamp(value: int, min_val: int = MIN_SCORE, max_val: int = MAX_SCORE) -> int:
    return max(min_val, min(max_val, value))


class AnswerScorer:
    """
    Scores and evaluates candidate answers.
    """

    @classmethod
    def score_technical(cls, question: str, answer: str) -> int:
        """
        Score the technical depth of an answer.

        Args:
            question: The question that was asked (kept for interface symmetry)
            answer: The candidate's answer

        Returns:
            Score from 0-10
        """
        score = BASE_SCORE

        word_count = PatternMatcher.word_count(answer)
        if word_count < SHORT_ANSWER_WORDS:
            score += SHORT_ANSWER_PENALTY
        elif word_count > LONG_ANSWER_WORDS:
            score += LONG_ANSWER_BONUS

        score += min(PatternMatcher.count_hits(answer, TECHNICAL_TERMS), MAX_TECHNICAL_TERM_BONUS)

        if PatternMatcher.has_digit(answer):
            score += METRIC_BONUS
        if PatternMatcher.contains_any(answer, EXAMPLE_TERMS):
            score += EXAMPLE_BONUS

        score += min(PatternMatcher.count_hits(answer, PROBLEM_SOLVING_TERMS), MAX_PROBLEM_SOLVING_BONUS)

        return clamp(score)

    @classmethod
    def score_communication(cls, answer: str) -> CommunicationScores:
        """Score clarity, confidence and honesty of a behavioral answer."""
        return CommunicationScores(
            clarity=cls.score_clarity(answer),
            confidence=cls._apply_rules(answer, CONFIDENCE_RULES),
            honesty=cls._apply_rules(answer, HONESTY_RULES),
        )

    @classmethod
    def score_behavioral(cls, answer: str) -> float:
        """Mean of the three communication dimensions."""
        return cls.score_communication(answer).average

    @classmethod
    def score_clarity(cls, answer: str) -> int:
        score = BASE_SCORE
        if PatternMatcher.contains_any(answer, STRUCTURE_WORDS, case_sensitive=True):
            score += STRUCTURE_BONUS
        if PatternMatcher.sentence_parts(answer) > MIN_SENTENCE_PARTS:
            score += MULTI_SENTENCE_BONUS
        return cls._apply_rules(answer, CLARITY_RULES, start=score)

    @staticmethod
    def _apply_rules(answer: str, rules: List[Tuple[Sequence[str], int]], start: int = BASE_SCORE) -> int:
        score = start
        for phrases, delta in rules:
            if PatternMatcher.contains_any(answer, phrases):
                score += delta
        return clamp(score)

    @staticmethod
    def mean(scores: Sequence[float], label: str = "scores") -> float:
        """Arithmetic mean; an empty list averages to 0.0."""
        if not scores:
            logger.warning(f"No {label} to average, using 0.0")
            return 0.0
        return sum(scores) / len(scores)
