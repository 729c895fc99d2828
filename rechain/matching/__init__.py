"""
Домен Matching: цепочка регулярных выражений с сужением по группе "out".

Вход: текст (документ или строка)
Выход: суженный текст или None
"""

from .pattern_stage import PatternStage, compile_stages
from .regex_chain import RegexChain
from .domain.exceptions import MatchingError, PatternCompilationError

__all__ = [
    "PatternStage",
    "compile_stages",
    "RegexChain",
    "MatchingError",
    "PatternCompilationError",
]
