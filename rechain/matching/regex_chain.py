"""
Regex Chain Matcher: последовательное сужение.

Алгоритм:
1. candidate = входной текст (документ или строка)
2. Для каждого этапа по порядку:
   - search (не fullmatch) в candidate
   - нет совпадения -> None, остальные этапы не вычисляются
   - narrows -> candidate = текст группы "out" (None, если группа не участвовала)
   - иначе candidate не меняется
3. Все этапы выполнены -> итоговый candidate

Пустой список этапов всегда даёт совпадение (весь текст).
"""

from typing import Iterable, Optional, Sequence, Tuple

from .pattern_stage import PatternStage, compile_stages


class RegexChain:
    """
    Упорядоченная цепочка этапов.

    Не хранит изменяемого состояния: повторный вызов match()
    на том же тексте даёт тот же результат.
    """

    def __init__(self, stages: Sequence[PatternStage] = ()):
        self._stages: Tuple[PatternStage, ...] = tuple(stages)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "RegexChain":
        """
        Raises:
            PatternCompilationError: Если хотя бы одно выражение некорректно
        """
        return cls(compile_stages(patterns))

    @property
    def stages(self) -> Tuple[PatternStage, ...]:
        return self._stages

    def __len__(self) -> int:
        return len(self._stages)

    def __bool__(self) -> bool:
        return bool(self._stages)

    def match(self, text: str) -> Optional[str]:
        """
        Прогоняет текст через все этапы.

        Args:
            text: Весь документ или одна строка

        Returns:
            Итоговый текст-кандидат или None
        """
        candidate = text
        for stage in self._stages:
            candidate = stage.apply(candidate)
            if candidate is None:
                return None
        return candidate
