"""
Session store.

A session is a ``sessions`` row plus a signed credential that names it
(``jti``) and its user (``sub``). The credential alone is never enough:
deleting the row revokes it before ``exp``.
"""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from bookshelf.core.exceptions import Unauthenticated
from bookshelf.core.logger import logger
from bookshelf.core.security import create_access_token, decode_access_token
from bookshelf.core.session import SessionContext
from bookshelf.models import User, UserSession


def create_session(db: Session, user: User) -> str:
    session = UserSession(id=uuid.uuid4(), user_id=user.id)
    db.add(session)
    db.commit()

    logger.info(f"LOGIN SUCCESS | user_id={user.id} | session_id={session.id}")
    return create_access_token(user.id, session.id)


def resolve_session(db: Session, token: str) -> SessionContext:
    payload = decode_access_token(token)

    try:
        user_id = uuid.UUID(payload["sub"])
        session_id = uuid.UUID(payload["jti"])
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid or expired session")

    session = db.scalar(
        select(UserSession).where(
            UserSession.id == session_id,
            UserSession.user_id == user_id
        )
    )
    if session is None:
        raise Unauthenticated("Invalid or expired session")

    return SessionContext(user_id=user_id, session_id=session_id)


def revoke_session(db: Session, context: SessionContext) -> None:
    db.execute(
        delete(UserSession).where(
            UserSession.id == context.session_id,
            UserSession.user_id == context.user_id
        )
    )
    db.commit()

    logger.info(f"LOGOUT | user_id={context.user_id} | session_id={context.session_id}")
