"""
Resume signal extraction.
Pulls skills, tools, projects, ownership statements, experience and claim
classes out of raw resume text with deterministic pattern tables.
"""
import re
import logging
from typing import Dict, List, Pattern, Tuple

from models.schemas import ResumeAnalysis
from utils.matching import PatternMatcher

logger = logging.getLogger(__name__)


def _table(categories: List[Tuple[str, List[str]]]) -> List[Tuple[str, Pattern]]:
    return [(name, PatternMatcher.compile_alternation(items)) for name, items in categories]


class ResumeSignalExtractor:
    """
    Extracts structured signals from resume text.
    """

    # Alternation order matters: "JavaScript" must be tried before "Java"
    SKILL_CATEGORIES = _table([
        ("frameworks", ["React", "Vue", "Angular", "Node.js", "Express", "MongoDB", "PostgreSQL", "MySQL"]),
        ("languages", ["JavaScript", "TypeScript", "Python", "Java", "C++", "Go", "Rust"]),
        ("cloud", ["AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Git"]),
        ("architecture", ["REST API", "GraphQL", "Microservices", "Serverless"]),
    ])

    TOOL_CATEGORIES = _table([
        ("editors", ["VS Code", "IntelliJ", "Eclipse", "Xcode"]),
        ("collaboration", ["Jira", "Trello", "Asana", "Slack", "Teams"]),
        ("build", ["Webpack", "Vite", "Babel", "ESLint", "Prettier"]),
        ("testing", ["Jest", "Mocha", "Cypress", "Selenium"]),
    ])

    PROJECT_PATTERN = re.compile(
        r"(?:project|built|developed|created|designed|implemented)[^.!?]*[.!?]",
        re.IGNORECASE,
    )

    OWNERSHIP_PATTERN = re.compile(
        r"(?:I|my|we|our|led|owned|responsible for|managed)[^.!?]*[.!?]",
        re.IGNORECASE,
    )

    # Each class is scanned keyword group by keyword group
    CLAIM_CLASSES: Dict[str, List[Pattern]] = {
        "strong_claims": [
            PatternMatcher.compile_sentences(r"expert|master|senior|lead|architect"),
            PatternMatcher.compile_sentences(r"scaled|optimized|improved|increased|reduced"),
            PatternMatcher.compile_sentences(r"built|created|designed|implemented|developed"),
        ],
        "vague_statements": [
            PatternMatcher.compile_sentences(r"various|multiple|several|many|some"),
            PatternMatcher.compile_sentences(r"familiar with|knowledge of|experience with"),
            PatternMatcher.compile_sentences(r"etc\.|and more|including but not limited to"),
        ],
        "exaggerations": [
            PatternMatcher.compile_sentences(r"world-class|best|top|number one|revolutionary"),
            PatternMatcher.compile_sentences(r"perfect|flawless|guaranteed|100%"),
            PatternMatcher.compile_sentences(r"mastered|guru|ninja|rockstar"),
        ],
    }

    ROLE_REQUIREMENTS: Dict[str, List[str]] = {
        "frontend": ["React", "Vue", "Angular", "JavaScript", "TypeScript", "CSS", "HTML"],
        "backend": ["Node.js", "Express", "Python", "Java", "Databases", "APIs"],
        "fullstack": ["React", "Node.js", "Databases", "APIs", "JavaScript"],
        "devops": ["Docker", "Kubernetes", "CI/CD", "AWS", "Azure", "GCP"],
        "mobile": ["React Native", "Flutter", "Swift", "Kotlin", "Mobile"],
        "data": ["Python", "SQL", "Machine Learning", "Analytics", "Statistics"],
    }

    def analyze(self, resume: str, job_role: str) -> ResumeAnalysis:
        """
        Extract every resume signal.

        Args:
            resume: Plain resume text
            job_role: Role the candidate applies for (matched case-insensitively)

        Returns:
            ResumeAnalysis with all signal lists filled (possibly empty)
        """
        skills = self.extract_skills(resume)

        analysis = ResumeAnalysis(
            skills=skills,
            tools=self.extract_tools(resume),
            projects=self.extract_projects(resume),
            claimed_ownership=self.extract_ownership(resume),
            years_experience=self.extract_years_experience(resume),
            strong_claims=self._scan_claims(resume, "strong_claims"),
            vague_statements=self._scan_claims(resume, "vague_statements"),
            exaggerations=self._scan_claims(resume, "exaggerations"),
            mismatches=self.find_mismatches(skills, job_role),
        )

        logger.debug(
            f"Resume analysis: {len(analysis.skills)} skills, {len(analysis.tools)} tools, "
            f"{len(analysis.projects)} projects, {analysis.years_experience} years, "
            f"{len(analysis.exaggerations)} exaggerations, {len(analysis.mismatches)} mismatches"
        )
        return analysis

    def extract_skills(self, resume: str) -> List[str]:
        return PatternMatcher.find_unique(resume, self.SKILL_CATEGORIES)

    def extract_tools(self, resume: str) -> List[str]:
        return PatternMatcher.find_unique(resume, self.TOOL_CATEGORIES)

    def extract_projects(self, resume: str) -> List[str]:
        return PatternMatcher.find_all(resume, [self.PROJECT_PATTERN])

    def extract_ownership(self, resume: str) -> List[str]:
        return PatternMatcher.find_all(resume, [self.OWNERSHIP_PATTERN])

    def extract_years_experience(self, resume: str) -> int:
        return PatternMatcher.max_years(resume)

    def _scan_claims(self, resume: str, claim_class: str) -> List[str]:
        return PatternMatcher.find_all(resume, self.CLAIM_CLASSES[claim_class])

    def find_mismatches(self, skills: List[str], job_role: str) -> List[str]:
        """Role-required skills not covered by any extracted skill."""
        required = self.ROLE_REQUIREMENTS.get(job_role.lower(), [])
        return [
            requirement for requirement in required
            if not any(requirement.lower() in skill.lower() for skill in skills)
        ]


# Global instance
resume_extractor = ResumeSignalExtractor()
