"""
Input Acquirer: идентификатор -> (текст, режим разбиения).

Алгоритм:
1. URL (схема + authority) -> HTTP GET, по умолчанию line-by-line
2. Иначе -> файл (UTF-8), по умолчанию whole document
3. multiline=True инвертирует режим по умолчанию в обоих случаях
"""

from typing import Optional

from loguru import logger

from contracts.acquired_text_dto import AcquiredText, SourceKind, SplitMode
from .domain.interfaces import IInputAcquirer, ITextSource
from .infrastructure.file_text_source import FileTextSource
from .infrastructure.http_text_source import HttpTextSource
from .infrastructure.url_detector import is_url


# Режимы по умолчанию (без флага multiline)
DEFAULT_SPLIT_MODES = {
    SourceKind.URL: SplitMode.LINE_BY_LINE,
    SourceKind.FILE: SplitMode.WHOLE_DOCUMENT,
}


def resolve_split_mode(source_kind: SourceKind, multiline: bool) -> SplitMode:
    """Режим по умолчанию для источника, инвертированный флагом multiline."""
    default = DEFAULT_SPLIT_MODES[source_kind]
    if not multiline:
        return default
    if default is SplitMode.LINE_BY_LINE:
        return SplitMode.WHOLE_DOCUMENT
    return SplitMode.LINE_BY_LINE


class InputAcquirer(IInputAcquirer):
    """
    Получение текста из файла или по URL.

    ЦКП: AcquiredText с текстом и режимом разбиения.
    """

    def __init__(
        self,
        file_source: Optional[ITextSource] = None,
        http_source: Optional[ITextSource] = None,
    ):
        """
        Args:
            file_source: Источник для путей (по умолчанию FileTextSource)
            http_source: Источник для URL (по умолчанию HttpTextSource)
        """
        self.file_source = file_source or FileTextSource()
        self._http_source = http_source

    @property
    def http_source(self) -> ITextSource:
        # HTTP сессия создаётся только если действительно нужен URL
        if self._http_source is None:
            self._http_source = HttpTextSource()
        return self._http_source

    def acquire(self, identifier: str, multiline: bool = False) -> AcquiredText:
        """
        Получает текст и определяет режим разбиения.

        Args:
            identifier: Путь к файлу или URL
            multiline: Инвертировать режим разбиения по умолчанию

        Returns:
            AcquiredText

        Raises:
            AcquisitionError: Если текст получить не удалось
        """
        if is_url(identifier):
            source_kind = SourceKind.URL
            text = self.http_source.read(identifier)
        else:
            source_kind = SourceKind.FILE
            text = self.file_source.read(identifier)

        split_mode = resolve_split_mode(source_kind, multiline)
        logger.debug(
            f"[InputAcquirer] {source_kind.value}: {identifier}, "
            f"{len(text)} символов, режим {split_mode.value}"
        )

        return AcquiredText(
            text=text,
            split_mode=split_mode,
            source_kind=source_kind,
            identifier=identifier,
        )
