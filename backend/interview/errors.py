"""
Errors raised at the interview boundary, each tied to an HTTP status.
"""


class InterviewError(Exception):
    """Base error. `message` is what the caller sees."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(InterviewError):
    """Missing or malformed request fields, or an unknown action."""
    status_code = 400


class SessionNotFoundError(InterviewError, KeyError):
    """Answer submitted for a session id that does not exist (or already finished)."""
    status_code = 404

    def __init__(self, session_id: str):
        super().__init__("Session not found")
        self.session_id = session_id

    def __str__(self) -> str:
        return self.message


class InterviewInternalError(InterviewError):
    """Unexpected failure while running the interview. Not retried."""
    status_code = 500
