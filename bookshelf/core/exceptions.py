"""
Error taxonomy shared by the services, the auth gate and the repository.

Every error carries the HTTP status it is surfaced with; the mapping is
registered once in ``bookshelf.main``.
"""


class BookshelfError(Exception):
    status_code = 500
    default_detail = "Internal error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(BookshelfError):
    status_code = 401
    default_detail = "Not authenticated"


class NotFound(BookshelfError):
    status_code = 404
    default_detail = "Not found"


class InvalidInput(BookshelfError):
    status_code = 400
    default_detail = "Invalid input"


class Conflict(BookshelfError):
    status_code = 409
    default_detail = "Conflict"
