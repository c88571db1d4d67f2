from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from bookshelf.core.config import settings
from bookshelf.core.session import SessionContext
from bookshelf.db.session import get_db
from bookshelf.dependencies.auth import get_current_session
from bookshelf.schemas.users import SessionCreateSchema, SessionOut
from bookshelf.services.session_service import create_session, revoke_session
from bookshelf.services.user_service import verify_credentials

router = APIRouter(prefix="/session", tags=["Session"])


@router.post("", response_model=SessionOut)
def session_create(
    payload: SessionCreateSchema,
    response: Response,
    db: Session = Depends(get_db)
):
    user = verify_credentials(db, payload.email, payload.password)
    token = create_session(db, user)

    # WEB için cookie
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE
    )

    return {
        "access_token": token,
        "token_type": "bearer",
        "user_id": user.id
    }


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def session_delete(
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db)
):
    revoke_session(db, session)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return response
