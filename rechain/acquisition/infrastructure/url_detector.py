"""Определение, является ли идентификатор абсолютным URL."""

import urllib.parse


def is_url(identifier: str) -> bool:
    """
    Абсолютный URL = есть схема и authority (netloc).

    "https://example.com/file.txt" -> True
    "data/input.txt", "/tmp/x", "C:\\x" -> False
    """
    try:
        parsed = urllib.parse.urlparse(identifier)
    except ValueError:
        # например, незакрытый IPv6 литерал в netloc
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)
