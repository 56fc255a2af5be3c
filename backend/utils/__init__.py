# Utilities module
from .config import config
from .matching import PatternMatcher
