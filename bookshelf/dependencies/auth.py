from fastapi import Depends, Request
from sqlalchemy.orm import Session

from bookshelf.core.auth_context import get_current_token
from bookshelf.core.exceptions import Unauthenticated
from bookshelf.core.logger import logger
from bookshelf.core.session import SessionContext
from bookshelf.db.session import get_db
from bookshelf.services.session_service import resolve_session


def get_current_session(
    request: Request,
    db: Session = Depends(get_db)
) -> SessionContext:
    token = get_current_token(request)

    if not token:
        logger.info(f"UNAUTHENTICATED | path={request.url.path} | reason=missing")
        raise Unauthenticated()

    try:
        return resolve_session(db, token)
    except Unauthenticated:
        logger.info(f"UNAUTHENTICATED | path={request.url.path} | reason=invalid")
        raise
