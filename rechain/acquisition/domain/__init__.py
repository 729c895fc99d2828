from .exceptions import (
    AcquisitionError,
    AcquisitionFileNotFoundError,
    AcquisitionReadError,
    AcquisitionDecodingError,
    AcquisitionNetworkError,
    AcquisitionHTTPStatusError,
)
from .interfaces import ITextSource, IInputAcquirer

__all__ = [
    "AcquisitionError",
    "AcquisitionFileNotFoundError",
    "AcquisitionReadError",
    "AcquisitionDecodingError",
    "AcquisitionNetworkError",
    "AcquisitionHTTPStatusError",
    "ITextSource",
    "IInputAcquirer",
]
