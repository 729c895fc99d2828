from .exceptions import MatchingError, PatternCompilationError

__all__ = ["MatchingError", "PatternCompilationError"]
