# bookshelf/models/__init__.py

from .library import (
    User,
    UserSession,
    Book
)
