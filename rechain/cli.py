"""
Точка входа rechain.

Использование:
    # Весь файл, если в нём есть "an"
    rechain data.txt -e an

    # Построчно: только строки файла с "an"
    rechain data.txt -e an -m

    # Числа из строк страницы (URL по умолчанию разбивается на строки)
    rechain https://example.com/file.txt -e '(?P<out>\\d+)'
"""

import argparse
import os
import sys
from typing import List, Optional

from loguru import logger

from config.settings import CAPTURE_GROUP, LOG_FORMAT, LOG_LEVEL_DEFAULT, LOG_LEVEL_VERBOSE
from rechain import __version__
from rechain.acquisition.input_acquirer import InputAcquirer
from rechain.application.chain_pipeline import ChainPipeline
from rechain.domain.exceptions import RechainError
from rechain.matching.regex_chain import RegexChain


DESCRIPTION = (
    "Фильтрует текст файла или URL цепочкой регулярных выражений.\n\n"
    f'Именованная группа "{CAPTURE_GROUP}" (например, (?P<{CAPTURE_GROUP}>\\d+)) сужает текст:\n'
    "следующие выражения проверяются только на захваченной подстроке.\n"
    "Выражения без этой группы работают как фильтры и текст не меняют.\n"
    "Без выражений текст выводится целиком."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rechain",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file_or_url",
        help="Файл или URL; файлы по умолчанию не разбиваются, URL разбиваются на строки",
    )
    parser.add_argument(
        "-e", "--regex",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Регулярное выражение; можно указать несколько, применяются по порядку",
    )
    parser.add_argument(
        "-m", "--multiline",
        action="store_true",
        help="Инвертировать разбиение: файлы построчно, URL целиком",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Отладочный лог в stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Лог только в stderr: stdout занят результатами."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=LOG_LEVEL_VERBOSE if verbose else LOG_LEVEL_DEFAULT,
    )


def run(file_or_url: str, patterns: List[str], multiline: bool = False) -> None:
    """
    Компилирует выражения, получает текст и печатает выжившие записи.

    Raises:
        RechainError: Некорректное выражение или ошибка получения текста
    """
    # Выражения компилируются до чтения входа
    chain = RegexChain.from_patterns(patterns)

    acquired = InputAcquirer().acquire(file_or_url, multiline=multiline)

    for record in ChainPipeline(chain).process(acquired):
        print(record, flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция: возвращает код выхода."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        run(args.file_or_url, args.regex, multiline=args.multiline)
    except RechainError as e:
        logger.error(str(e))
        return 1
    except BrokenPipeError:
        # stdout закрыт читателем (например, `| head -1`)
        logger.debug("[cli] stdout закрыт, вывод прерван")
        _silence_stdout()
        return 1

    return 0


def _silence_stdout() -> None:
    """Направляет stdout в devnull, чтобы финальный flush интерпретатора не упал."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


if __name__ == "__main__":
    raise SystemExit(main())
