"""
Configuration settings for the interview engine.
All settings can be overridden via environment variables.
"""
import os
from typing import List
from dataclasses import dataclass, field


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = field(default_factory=lambda: os.getenv("INTERVIEW_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("INTERVIEW_PORT", "8000")))
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("INTERVIEW_CORS_ORIGINS", "*"))
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class InterviewConfig:
    """Interview flow configuration."""
    service_name: str = "AI Interviewer"
    version: str = "1.0.0"

    # Sent with the first question; {job_role} is interpolated
    greeting_template: str = (
        "Hello, thank you for joining. I'll be conducting your interview today "
        "for the role of {job_role}. Let's begin."
    )

    def greeting(self, job_role: str) -> str:
        return self.greeting_template.format(job_role=job_role)


class Config:
    """Main configuration class combining all config sections."""

    def __init__(self):
        self.server = ServerConfig()
        self.logging = LoggingConfig()
        self.interview = InterviewConfig()


# Global config instance
config = Config()
