from typing import Optional

from fastapi import Request

from bookshelf.core.config import settings


def get_current_token(request: Request) -> Optional[str]:
    # cookie (WEB)
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)

    # Authorization header (API clients)
    if not token:
        auth = request.headers.get("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth.split(" ", 1)[1].strip()

    return token or None
