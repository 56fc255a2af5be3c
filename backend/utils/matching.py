"""
Keyword and pattern matching helpers.
Every heuristic in the engine goes through these so that matching rules
(case folding, sentence boundaries, word splitting) stay identical everywhere.
"""
import re
from typing import Iterable, List, Pattern, Sequence, Tuple


# Sentence fragment containing a keyword: runs back to the previous period
# and forward to the next terminator
SENTENCE_TEMPLATE = r"[^.]*(?:{keywords})[^.]*[.!?]"

# <int> years / yrs, optional "+" after the number
YEARS_PATTERN = re.compile(r"([0-9]+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)
# Same, without the "+" allowance
YEARS_STRICT_PATTERN = re.compile(r"([0-9]+)\s*(?:years?|yrs?)", re.IGNORECASE)

DIGIT_PATTERN = re.compile(r"[0-9]")


class PatternMatcher:
    """
    Generic matcher over declarative (category, keyword-list) tables.
    """

    @staticmethod
    def compile_alternation(names: Sequence[str]) -> Pattern:
        """Case-insensitive alternation of literal names, in the given order."""
        return re.compile("|".join(re.escape(name) for name in names), re.IGNORECASE)

    @staticmethod
    def compile_sentences(keywords: str) -> Pattern:
        """Pattern matching every sentence that contains one of `keywords` (a regex alternation)."""
        return re.compile(SENTENCE_TEMPLATE.format(keywords=keywords), re.IGNORECASE)

    @classmethod
    def find_unique(cls, text: str, table: Iterable[Tuple[str, Pattern]]) -> List[str]:
        """
        Collect matches of every category pattern in table order.

        Exact duplicates are dropped; the first occurrence keeps its position.
        """
        found: List[str] = []
        seen = set()
        for _category, pattern in table:
            for match in pattern.findall(text):
                if match not in seen:
                    seen.add(match)
                    found.append(match)
        return found

    @staticmethod
    def find_all(text: str, patterns: Iterable[Pattern]) -> List[str]:
        """Concatenate all matches of each pattern, scanned independently."""
        found: List[str] = []
        for pattern in patterns:
            found.extend(match.group(0) for match in pattern.finditer(text))
        return found

    @staticmethod
    def max_years(text: str) -> int:
        """Largest `<int> years|yrs` value in the text, 0 if there is none."""
        years = [int(value) for value in YEARS_PATTERN.findall(text)]
        return max(years) if years else 0

    @staticmethod
    def first_years(text: str) -> int:
        """First `<int> years|yrs` value in the text, 0 if there is none."""
        match = YEARS_STRICT_PATTERN.search(text)
        return int(match.group(1)) if match else 0

    @staticmethod
    def contains_any(text: str, keywords: Sequence[str], case_sensitive: bool = False) -> bool:
        if case_sensitive:
            return any(keyword in text for keyword in keywords)
        lowered = text.lower()
        return any(keyword.lower() in lowered for keyword in keywords)

    @staticmethod
    def count_hits(text: str, keywords: Sequence[str]) -> int:
        """Number of distinct keywords present in the text (case-insensitive)."""
        lowered = text.lower()
        return sum(1 for keyword in keywords if keyword.lower() in lowered)

    @staticmethod
    def has_digit(text: str) -> bool:
        return DIGIT_PATTERN.search(text) is not None

    @staticmethod
    def word_count(text: str) -> int:
        """Words separated by single spaces. An empty string counts as one word."""
        return len(text.split(" "))

    @staticmethod
    def sentence_parts(text: str) -> int:
        """Number of pieces the text splits into on periods."""
        return len(text.split("."))

    @staticmethod
    def format_number(value: float) -> str:
        """Render a score the way the report consumers expect: 8 not 8.0, else shortest repr."""
        number = float(value)
        if number.is_integer():
            return str(int(number))
        return repr(number)
