import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

def server_error(session: Session, exc: Exception) -> HTTPException:
    """Roll back and turn an unexpected failure into a 500 carrying its message.

    Must be called from inside the ``except`` block handling ``exc``.
    """
    session.rollback()
    logger.exception("Request failed")
    message = str(getattr(exc, "orig", None) or exc) or "Unknown error"
    return HTTPException(status_code=500, detail=message)

def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        messages.append(f"{location}: {error.get('msg')}")
    return "; ".join(messages) or "Invalid request"

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": _validation_message(exc)}, status_code=400)

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
