"""
Memory module for the interview engine.
Provides resume signal extraction and the in-process session store.
"""

from .extractors import resume_extractor
from .session_store import session_store

__all__ = ['resume_extractor', 'session_store']
