from dataclasses import asdict, dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from research_tracker.core.logging import logger


class AppError(Exception):
    status_code = 400
    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"


class ValidationError(AppError):
    status_code = 400
    code = "validation_error"


class ConflictError(AppError):
    status_code = 409
    code = "conflict"


@dataclass(frozen=True)
class ErrorPayload:
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        # same "detail" key as an HTTPException body
        return {**asdict(self), "detail": self.message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        logger.info("request_failed", path=request.url.path, code=exc.code, message=exc.message)
        payload = ErrorPayload(code=exc.code, message=exc.message)
        return JSONResponse(payload.to_dict(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        fields = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            fields.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        message = "; ".join(fields) or "Invalid request"
        logger.info("request_failed", path=request.url.path, code=ValidationError.code, message=message)
        payload = ErrorPayload(code=ValidationError.code, message=message)
        return JSONResponse(payload.to_dict(), status_code=ValidationError.status_code)
