import pytest

from models.schemas import InterviewPhase, ResumeAnalysis
from interview.errors import InterviewInternalError
from interview.state import InterviewStateMachine


TECHNICAL = [f"technical {i}" for i in range(5)]
BEHAVIORAL = [f"behavioral {i}" for i in range(5)]


def make_machine(technical=TECHNICAL, behavioral=BEHAVIORAL):
    return InterviewStateMachine(
        session_id="s1",
        resume="resume",
        job_role="backend",
        resume_analysis=ResumeAnalysis(),
        technical_questions=technical,
        behavioral_questions=behavioral,
    )


def test_initial_state():
    machine = make_machine()
    assert machine.phase == InterviewPhase.TECHNICAL
    assert machine.current_question_index == 0
    assert machine.answers == []
    assert machine.current_question() == "technical 0"


def test_full_interview_walk():
    machine = make_machine()
    phases = []
    resets = 0
    previous_index = machine.current_question_index

    for i in range(10):
        machine.record_answer(f"answer {i}")
        if machine.current_question_index < previous_index:
            resets += 1
        previous_index = machine.current_question_index
        phases.append(machine.phase)

    assert phases[:4] == [InterviewPhase.TECHNICAL] * 4
    assert phases[4:9] == [InterviewPhase.BEHAVIORAL] * 5
    assert phases[9] == InterviewPhase.COMPLETE
    assert resets == 1
    assert machine.is_complete
    assert len(machine.answers) == 10
    assert machine.current_question() is None


def test_answers_are_tagged_with_question_and_phase():
    machine = make_machine()
    for i in range(6):
        machine.record_answer(f"answer {i}")

    assert machine.answers[0].question == "technical 0"
    assert machine.answers[4].type == InterviewPhase.TECHNICAL
    assert machine.answers[5].question == "behavioral 0"
    assert machine.answers[5].type == InterviewPhase.BEHAVIORAL
    assert machine.current_question_index == 1
    assert len(machine.answers_for(InterviewPhase.BEHAVIORAL)) == machine.current_question_index


def test_returns_next_question_across_phase_boundary():
    machine = make_machine()
    for i in range(4):
        assert machine.record_answer("a") == f"technical {i + 1}"
    assert machine.record_answer("a") == "behavioral 0"


def test_recording_after_completion_fails():
    machine = make_machine()
    for _ in range(10):
        machine.record_answer("a")
    with pytest.raises(InterviewInternalError):
        machine.record_answer("one too many")
    assert len(machine.answers) == 10


def test_empty_behavioral_list_completes_after_technical():
    machine = make_machine(behavioral=[])
    for _ in range(5):
        machine.record_answer("a")
    assert machine.is_complete


def test_snapshot():
    machine = make_machine()
    machine.record_answer("first")
    session = machine.to_session()
    assert session.session_id == "s1"
    assert session.phase == InterviewPhase.TECHNICAL
    assert session.current_question_index == 1
    assert session.answers[0].answer == "first"
    assert session.technical_questions == tuple(TECHNICAL)
