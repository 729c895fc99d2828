"""
Chain Pipeline - оркестратор Acquisition -> Matching.

Решает, как текст подаётся в RegexChain:
- нет выражений -> текст целиком, без разбиения
- whole document -> одна проверка всего текста
- line-by-line -> каждая строка отдельно, в исходном порядке

Записи выдаются лениво: строка печатается сразу после проверки.
"""

from dataclasses import dataclass
from typing import Iterator

from loguru import logger

from config.settings import LINE_SEPARATOR
from contracts.acquired_text_dto import AcquiredText, SplitMode
from ..matching.regex_chain import RegexChain


@dataclass
class PipelineStats:
    """Счётчики последнего прогона (для отладки)."""
    records_processed: int = 0
    records_emitted: int = 0

    def to_dict(self) -> dict:
        return {
            "records_processed": self.records_processed,
            "records_emitted": self.records_emitted,
        }


class ChainPipeline:
    """
    Пайплайн фильтрации текста цепочкой выражений.

    ЦКП: упорядоченный поток выводимых записей.
    """

    def __init__(self, chain: RegexChain):
        self.chain = chain
        self.stats = PipelineStats()

    def process(self, acquired: AcquiredText) -> Iterator[str]:
        """
        Прогоняет полученный текст через цепочку.

        Args:
            acquired: Результат Acquisition

        Yields:
            Записи для вывода, по одной на выжившую строку/документ
        """
        self.stats = PipelineStats()

        if not self.chain:
            logger.debug("[ChainPipeline] Выражений нет, вывод без изменений")
            self.stats.records_processed = 1
            self.stats.records_emitted = 1
            yield acquired.text
            return

        if acquired.split_mode is SplitMode.WHOLE_DOCUMENT:
            records = [acquired.text]
        else:
            records = acquired.text.split(LINE_SEPARATOR)

        logger.debug(
            f"[ChainPipeline] Старт: {len(self.chain)} выражений, "
            f"режим {acquired.split_mode.value}, записей {len(records)}"
        )

        for record in records:
            self.stats.records_processed += 1
            result = self.chain.match(record)
            if result is None:
                continue
            self.stats.records_emitted += 1
            yield result

        logger.debug(f"[ChainPipeline] Готово: {self.stats.to_dict()}")
