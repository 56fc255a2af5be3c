"""
Question templates for the technical and behavioral phases.
Technical questions are filled in from resume signals; behavioral ones are fixed.
"""
from typing import Dict, List, Sequence

from models.schemas import ResumeAnalysis


ROLE_PROBLEM_QUESTIONS: Dict[str, str] = {
    "frontend": "How would you optimize the performance of a React application that's loading slowly?",
    "backend": "How would you design a scalable API that handles millions of requests?",
    "fullstack": "How would you architect a full-stack application from scratch?",
    "devops": "How would you set up CI/CD pipeline for a microservices application?",
    "mobile": "How would you handle offline data synchronization in a mobile app?",
    "data": "How would you design a data pipeline for real-time analytics?",
}

GENERIC_PROBLEM_QUESTION = "Describe your approach to solving complex technical problems."

BEHAVIORAL_QUESTIONS: List[str] = [
    "Tell me about a time when you faced a significant challenge or conflict in a project. How did you handle it?",
    "Describe a situation where you had to work with a difficult team member. How did you manage the relationship?",
    "Give an example of a time when you had to learn a new technology quickly. What was your approach?",
    "Describe a project where you took leadership. What was your role and what was the outcome?",
    "Tell me about a time when you made a mistake. How did you handle it and what did you learn?",
]

# Experience tiers: below JUNIOR_MAX_YEARS, below MID_MAX_YEARS, everything above
JUNIOR_MAX_YEARS = 2
MID_MAX_YEARS = 5


class QuestionGenerator:
    """
    Builds the fixed-length question lists for an interview.
    Every template has a fallback, so the lists are always full.
    """

    @classmethod
    def technical_questions(cls, analysis: ResumeAnalysis, job_role: str) -> List[str]:
        """The five technical questions, in asking order."""
        return [
            cls.skill_question(analysis.skills, job_role),
            cls.project_question(analysis.projects),
            cls.tool_question(analysis.tools),
            cls.experience_question(analysis.years_experience),
            cls.problem_solving_question(job_role),
        ]

    @staticmethod
    def behavioral_questions() -> List[str]:
        return list(BEHAVIORAL_QUESTIONS)

    @staticmethod
    def skill_question(skills: Sequence[str], job_role: str) -> str:
        primary = skills[:3]
        if not primary:
            return f"What technical skills do you consider most important for a {job_role} role?"
        return f"Can you explain how you've used {', '.join(primary)} in your previous projects?"

    @staticmethod
    def project_question(projects: Sequence[str]) -> str:
        if not projects:
            return "Tell me about a challenging project you've worked on recently."
        return (
            "Choose one project from your resume and walk me through the technical "
            "challenges you faced and how you solved them."
        )

    @staticmethod
    def tool_question(tools: Sequence[str]) -> str:
        primary = tools[:2]
        if not primary:
            return "What development tools and environments do you prefer and why?"
        return f"How do you use {' and '.join(primary)} in your development workflow?"

    @staticmethod
    def experience_question(years: int) -> str:
        if years < JUNIOR_MAX_YEARS:
            return "How do you stay updated with the latest technologies and best practices?"
        if years < MID_MAX_YEARS:
            return "What's the most complex technical problem you've solved in your career so far?"
        return (
            "How have you mentored junior developers or contributed to technical "
            "decision-making in your team?"
        )

    @staticmethod
    def problem_solving_question(job_role: str) -> str:
        return ROLE_PROBLEM_QUESTIONS.get(job_role.lower(), GENERIC_PROBLEM_QUESTION)
