from .file_text_source import FileTextSource
from .http_text_source import HttpTextSource, response_encoding
from .url_detector import is_url

__all__ = [
    "FileTextSource",
    "HttpTextSource",
    "response_encoding",
    "is_url",
]
