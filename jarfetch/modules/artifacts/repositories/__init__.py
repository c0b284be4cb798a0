from .local import LocalRepository

__all__ = ["LocalRepository"]
