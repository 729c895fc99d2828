"""
Исключения для домена Matching.

Промах совпадения ошибкой не является: строка просто не выводится.
"""

from ...domain.exceptions import RechainError


class MatchingError(RechainError):
    """Базовое исключение для ошибок домена Matching."""

    def _format_message(self) -> str:
        return f"Matching Error: {super()._format_message()}"


class PatternCompilationError(MatchingError):
    """Регулярное выражение не компилируется. Фатально, до чтения входа."""

    def __init__(self, message: str, pattern: str, component: str = None, original_error: Exception = None):
        self.pattern = pattern
        super().__init__(message, component=component, original_error=original_error)
