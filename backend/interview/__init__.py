# Interview module
from .errors import InterviewError, InvalidRequestError, SessionNotFoundError, InterviewInternalError
from .phases import InterviewPhases, PHASE_ORDER
from .state import InterviewStateMachine
from .scoring import AnswerScorer
from .questions import QuestionGenerator
from .contradictions import ContradictionDetector
from .report import ReportAggregator
