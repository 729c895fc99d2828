"""
Pattern Stage: скомпилированное выражение + флаг narrows.

narrows = в выражении объявлена именованная группа "out".
Флаг вычисляется один раз при компиляции, а не на каждое совпадение.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from loguru import logger

from config.settings import CAPTURE_GROUP
from .domain.exceptions import PatternCompilationError


@dataclass(frozen=True)
class PatternStage:
    """
    Один этап цепочки.

    ЦКП: выражение, которое либо фильтрует текст (narrows=False),
    либо сужает его до группы "out" (narrows=True).
    """
    pattern: re.Pattern       # Скомпилированное выражение
    narrows: bool             # Есть ли группа CAPTURE_GROUP

    @property
    def source(self) -> str:
        return self.pattern.pattern

    @classmethod
    def compile(cls, pattern: str) -> "PatternStage":
        """
        Компилирует выражение в этап.

        Args:
            pattern: Исходная строка регулярного выражения

        Returns:
            PatternStage

        Raises:
            PatternCompilationError: Если синтаксис выражения некорректен
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise PatternCompilationError(
                message=f"Некорректное регулярное выражение: {pattern!r}",
                pattern=pattern,
                component="PatternStage",
                original_error=e
            )

        narrows = CAPTURE_GROUP in compiled.groupindex
        logger.debug(f"[PatternStage] {pattern!r} скомпилировано, narrows={narrows}")
        return cls(pattern=compiled, narrows=narrows)

    def apply(self, candidate: str) -> Optional[str]:
        """
        Применяет этап к тексту-кандидату.

        Returns:
            Текст для следующего этапа или None, если этап не выполнен:
            - нет совпадения
            - группа "out" есть, но не участвовала в совпадении
        """
        match = self.pattern.search(candidate)
        if match is None:
            return None
        if not self.narrows:
            return candidate
        # group() вернёт None, если группа не участвовала (например, в другой ветке |)
        return match.group(CAPTURE_GROUP)


def compile_stages(patterns: Iterable[str]) -> Tuple[PatternStage, ...]:
    """Компилирует все выражения по порядку. Первая ошибка фатальна."""
    return tuple(PatternStage.compile(p) for p in patterns)
