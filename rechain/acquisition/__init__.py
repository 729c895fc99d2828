"""
Домен Acquisition: получение текста из файла или по URL.

Вход: путь или URL + флаг multiline
Выход: contracts.AcquiredText
"""

from .input_acquirer import InputAcquirer, resolve_split_mode
from .infrastructure import FileTextSource, HttpTextSource, is_url

__all__ = [
    "InputAcquirer",
    "resolve_split_mode",
    "FileTextSource",
    "HttpTextSource",
    "is_url",
]
