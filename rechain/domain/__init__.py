from .exceptions import RechainError

__all__ = ["RechainError"]
