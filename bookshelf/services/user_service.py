from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookshelf.core.exceptions import Conflict, InvalidInput, Unauthenticated
from bookshelf.core.logger import logger
from bookshelf.core.security import hash_password, verify_password
from bookshelf.models import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str):
    return db.scalar(select(User).where(User.email == normalize_email(email)))


def register_user(db: Session, name: str, email: str, password: str) -> User:
    email = normalize_email(email)
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        raise InvalidInput("Invalid email address")

    if get_user_by_email(db, email):
        raise Conflict("User already exists")

    user = User(
        name=name.strip(),
        email=email,
        password_hash=hash_password(password)
    )
    db.add(user)

    try:
        db.commit()
    except IntegrityError:
        # iki eşzamanlı kayıt aynı e-postayı yarıştırdı
        db.rollback()
        raise Conflict("User already exists")

    logger.info(f"REGISTER | user_id={user.id} | email={email}")
    return user


def verify_credentials(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)

    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"LOGIN FAILED | email={normalize_email(email)}")
        raise Unauthenticated("Invalid credentials")

    return user
