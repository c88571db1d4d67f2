from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bookshelf.core.exceptions import BookshelfError
from bookshelf.db.init_db import init_db
from bookshelf.routers import books, session, users


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title="Bookshelf Backend",
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(BookshelfError)
async def bookshelf_error_handler(request: Request, exc: BookshelfError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


app.include_router(users.router)
app.include_router(session.router)
app.include_router(books.router)


@app.get("/ping", tags=["Health"])
def ping():
    return {"status": "ok"}
