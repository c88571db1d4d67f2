from .books import BookRepository

__all__ = ["BookRepository"]
