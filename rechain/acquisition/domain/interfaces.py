"""
Интерфейсы (абстрактные классы) для домена Acquisition.

Домен Acquisition отвечает за:
1. Определение типа идентификатора (файл или URL)
2. Чтение текста из источника
3. Выбор режима разбиения по умолчанию
"""

from abc import ABC, abstractmethod

from contracts.acquired_text_dto import AcquiredText


class ITextSource(ABC):
    """Интерфейс источника текста (домен Acquisition)."""

    @abstractmethod
    def read(self, identifier: str) -> str:
        """
        Читает весь текст источника в память.

        Args:
            identifier: Путь к файлу или URL

        Returns:
            Декодированный текст

        Raises:
            AcquisitionError: Если текст получить не удалось
        """
        pass


class IInputAcquirer(ABC):
    """Интерфейс получения текста с режимом разбиения (домен Acquisition)."""

    @abstractmethod
    def acquire(self, identifier: str, multiline: bool = False) -> AcquiredText:
        """
        Получает текст и определяет режим разбиения.

        Args:
            identifier: Путь к файлу или URL
            multiline: Инвертировать режим разбиения по умолчанию

        Returns:
            AcquiredText
        """
        pass
