from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

RequiredText = Annotated[str, Field(min_length=1, max_length=255)]


class BookPayload(BaseModel):
    """Body of POST /books and PUT /books/{id}.

    ``genrer`` is the field name existing clients send and read back.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: RequiredText
    author: RequiredText
    genrer: RequiredText


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    genrer: str
    user_id: UUID
    created_at: Optional[datetime] = None


class BookEnvelope(BaseModel):
    book: BookOut


class BookListEnvelope(BaseModel):
    books: List[BookOut]
