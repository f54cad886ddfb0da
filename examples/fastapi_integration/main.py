"""
FastAPI Integration Example

Serves a Relay-style connection over a REST endpoint and turns pagination
errors into 400 responses carrying the message and extensions verbatim.
"""

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from relayconn import PaginationError, make_connection


class Book(BaseModel):
    """Book node"""

    isbn: str
    title: str


BOOKS = [
    Book(isbn="978-0131103627", title="The C Programming Language"),
    Book(isbn="978-0262033848", title="Introduction to Algorithms"),
    Book(isbn="978-0201633610", title="Design Patterns"),
    Book(isbn="978-0596007126", title="Head First Design Patterns"),
]


app = FastAPI(title="relayconn + FastAPI Example")

paginated = make_connection(max_limit=2, pagination_required=True)


@paginated(to_cursor=lambda book, args, index: book.isbn)
async def list_books(root, args, context, info) -> list[Book]:
    """Fetch every book; the connection does the slicing"""
    return BOOKS


@app.exception_handler(PaginationError)
async def pagination_error_handler(request: Request, exc: PaginationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [{"message": exc.message, "extensions": exc.extensions}]},
    )


@app.get("/books")
async def get_books(
    first: int | None = None,
    last: int | None = None,
    after: str | None = Query(default=None),
    before: str | None = Query(default=None),
) -> dict:
    """List books as a connection"""
    args = {"first": first, "last": last, "after": after, "before": before}
    connection = await list_books(None, args, None, None)
    return {"data": {"books": connection.to_dict()}}


# Run with: uvicorn main:app --reload
# Try: http://localhost:8000/books?first=2
#      http://localhost:8000/books?first=2&after=978-0262033848
#      http://localhost:8000/books?first=10  (400: limit exceeded)
