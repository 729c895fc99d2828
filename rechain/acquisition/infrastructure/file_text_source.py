"""
Чтение текста из локального файла.

Файл читается целиком и строго декодируется как UTF-8.
"""

from pathlib import Path

from loguru import logger

from config.settings import FILE_ENCODING
from ..domain.exceptions import (
    AcquisitionDecodingError,
    AcquisitionFileNotFoundError,
    AcquisitionReadError,
)
from ..domain.interfaces import ITextSource


class FileTextSource(ITextSource):
    """Источник текста: файл на диске."""

    def __init__(self, encoding: str = FILE_ENCODING):
        self.encoding = encoding

    def read(self, identifier: str) -> str:
        """
        Читает файл и декодирует его содержимое.

        Args:
            identifier: Путь к файлу

        Returns:
            Текст файла

        Raises:
            AcquisitionFileNotFoundError: Если файл не существует
            AcquisitionReadError: Если файл не удалось прочитать
            AcquisitionDecodingError: Если содержимое не в кодировке self.encoding
        """
        path = Path(identifier)
        try:
            if not path.exists():
                raise AcquisitionFileNotFoundError(
                    message=f"Файл не найден: {identifier}",
                    component="FileTextSource"
                )

            raw_bytes = path.read_bytes()
        except AcquisitionFileNotFoundError:
            raise
        except OSError as e:
            raise AcquisitionReadError(
                message=f"Не удалось прочитать файл: {identifier}",
                component="FileTextSource",
                original_error=e
            )

        try:
            text = raw_bytes.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise AcquisitionDecodingError(
                message=f"Файл не в кодировке {self.encoding}: {identifier}",
                component="FileTextSource",
                original_error=e
            )

        logger.debug(f"[FileTextSource] Файл прочитан: {path.name}, {len(raw_bytes)} байт")
        return text
