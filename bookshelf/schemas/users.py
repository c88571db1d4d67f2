from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from typing_extensions import Annotated


class UserRegisterSchema(BaseModel):
    # only the display name is stripped, passwords are taken as typed
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    email: Annotated[str, Field(min_length=3, max_length=255)]
    password: Annotated[str, Field(min_length=6, max_length=128)]


class SessionCreateSchema(BaseModel):
    email: Annotated[str, Field(min_length=1, max_length=255)]
    password: Annotated[str, Field(min_length=1, max_length=128)]


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class UserEnvelope(BaseModel):
    user: UserOut


class SessionOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: UUID
