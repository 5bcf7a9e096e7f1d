from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """JSON envelope for every error the API returns."""

    error: str
    detail: str | None = None
    status_code: int


class AppError(Exception):
    """Base application exception, rendered as an ``ErrorResponse``."""

    default_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        super().__init__(self.message)


class InvalidArgumentError(AppError):
    """A caller supplied a value outside the domain of a calendar operation."""

    default_status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(AppError):
    default_status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(AppError):
    default_status_code = status.HTTP_403_FORBIDDEN


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``loc: msg`` pairs, e.g. ``query.join_date: Field required``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts)


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="ValidationError",
            detail=_format_validation_errors(exc),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
