"""
Контракты DTO между доменами rechain.

Контракты используют Pydantic v2 для валидации.

Контракты:
- Acquisition -> Matching: AcquiredText (acquired_text_dto.py)
"""

from .acquired_text_dto import AcquiredText, SplitMode, SourceKind

__all__ = [
    "AcquiredText",
    "SplitMode",
    "SourceKind",
]
