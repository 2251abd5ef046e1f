# errors.py
import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class QuizMakerError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(QuizMakerError):
    """Missing or malformed required field. `errors` lists each problem by location."""
    status_code = 400

    def __init__(self, detail: str, errors: Optional[List[dict]] = None):
        super().__init__(detail)
        self.errors = errors or []


class ConflictError(QuizMakerError):
    status_code = 409


class AuthenticationError(QuizMakerError):
    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    status_code = 400

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail)


class NotFoundError(QuizMakerError):
    status_code = 404


async def quiz_maker_error_handler(request: Request, exc: QuizMakerError):
    body = {"detail": exc.detail}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    headers = None
    if type(exc) is AuthenticationError:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]
    logger.warning(f"Rejected request body for {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request body", "errors": errors})


async def storage_error_handler(request: Request, exc: PyMongoError):
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizMakerError, quiz_maker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(PyMongoError, storage_error_handler)
