"""
Базовые исключения проекта rechain.

Все фатальные ошибки (компиляция паттерна, получение текста) наследуются
от RechainError. CLI ловит только его и превращает в код выхода.
"""

from typing import Optional


class RechainError(Exception):
    """Базовое исключение для всех фатальных ошибок rechain."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg
