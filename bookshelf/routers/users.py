from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bookshelf.db.session import get_db
from bookshelf.schemas.users import UserEnvelope, UserRegisterSchema
from bookshelf.services.user_service import register_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=UserEnvelope
)
def user_register(payload: UserRegisterSchema, db: Session = Depends(get_db)):
    user = register_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password
    )
    return {"user": user}
