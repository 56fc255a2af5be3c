import pytest

from models.schemas import ResumeAnalysis
from interview.questions import BEHAVIORAL_QUESTIONS, GENERIC_PROBLEM_QUESTION, QuestionGenerator


def test_skill_question_names_top_three_skills():
    question = QuestionGenerator.skill_question(["React", "Python", "AWS", "Docker"], "backend")
    assert question == "Can you explain how you've used React, Python, AWS in your previous projects?"


def test_skill_question_fallback_uses_role():
    question = QuestionGenerator.skill_question([], "backend")
    assert question == "What technical skills do you consider most important for a backend role?"


def test_project_question_branches():
    assert QuestionGenerator.project_question(["built a thing."]).startswith("Choose one project from your resume")
    assert QuestionGenerator.project_question([]) == "Tell me about a challenging project you've worked on recently."


def test_tool_question_names_top_two_tools():
    question = QuestionGenerator.tool_question(["Jira", "Jest", "Cypress"])
    assert question == "How do you use Jira and Jest in your development workflow?"
    assert QuestionGenerator.tool_question([]) == "What development tools and environments do you prefer and why?"


@pytest.mark.parametrize("years,fragment", [
    (0, "stay updated"),
    (1, "stay updated"),
    (2, "most complex technical problem"),
    (4, "most complex technical problem"),
    (5, "mentored junior developers"),
    (15, "mentored junior developers"),
])
def test_experience_tiers(years, fragment):
    assert fragment in QuestionGenerator.experience_question(years)


def test_problem_solving_question_by_role():
    assert "React application" in QuestionGenerator.problem_solving_question("Frontend")
    assert "data pipeline" in QuestionGenerator.problem_solving_question("data")
    assert QuestionGenerator.problem_solving_question("astronaut") == GENERIC_PROBLEM_QUESTION


def test_always_five_technical_questions():
    questions = QuestionGenerator.technical_questions(ResumeAnalysis(), "unknown")
    assert len(questions) == 5
    assert all(questions)


def test_behavioral_questions_are_fixed_copies():
    questions = QuestionGenerator.behavioral_questions()
    assert questions == BEHAVIORAL_QUESTIONS
    assert len(questions) == 5
    questions.append("extra")
    assert len(QuestionGenerator.behavioral_questions()) == 5
