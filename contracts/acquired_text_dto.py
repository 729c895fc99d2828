"""
DTO контракт: Acquisition -> Matching

Текст, полученный из файла или по URL, вместе с режимом разбиения.
Acquirer принимает единственное структурное решение: split_mode.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SplitMode(str, Enum):
    """Как текст подаётся в цепочку выражений."""

    WHOLE_DOCUMENT = "whole_document"
    LINE_BY_LINE = "line_by_line"


class SourceKind(str, Enum):
    """Откуда получен текст."""

    FILE = "file"
    URL = "url"


class AcquiredText(BaseModel):
    """
    Результат получения текста.

    Передаётся в ChainPipeline без изменений.
    """

    text: str = Field(..., description="Полный текст документа")
    split_mode: SplitMode = Field(..., description="Режим разбиения текста")
    source_kind: SourceKind = Field(..., description="Файл или URL")
    identifier: str = Field(..., description="Путь или URL, как передан пользователем")

    model_config = ConfigDict(frozen=True)

    @property
    def is_split(self) -> bool:
        return self.split_mode is SplitMode.LINE_BY_LINE
