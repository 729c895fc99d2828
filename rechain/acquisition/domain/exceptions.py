"""
Исключения для домена Acquisition.

Ошибки чтения файла и HTTP-запроса. Все фатальны, повторов нет.
"""

from typing import Optional

from ...domain.exceptions import RechainError


class AcquisitionError(RechainError):
    """Базовое исключение для ошибок получения текста."""

    def _format_message(self) -> str:
        return f"Acquisition Error: {super()._format_message()}"


class AcquisitionFileNotFoundError(AcquisitionError):
    """Файл не найден."""
    pass


class AcquisitionReadError(AcquisitionError):
    """Ошибка чтения файла (директория, права доступа и т.д.)."""
    pass


class AcquisitionDecodingError(AcquisitionError):
    """Содержимое не декодируется в текст (невалидный UTF-8)."""
    pass


class AcquisitionNetworkError(AcquisitionError):
    """Сетевая ошибка: DNS, соединение, некорректный URL."""
    pass


class AcquisitionHTTPStatusError(AcquisitionNetworkError):
    """Сервер вернул неуспешный HTTP статус."""

    def __init__(
        self,
        message: str,
        status_code: int,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.status_code = status_code
        super().__init__(message, component=component, original_error=original_error)
