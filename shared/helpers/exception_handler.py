import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from shared.core.saga import SagaError
from shared.core.schemas import JsonOutResult
from shared.core.store import DataStoreError
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))
    return "; ".join(parts)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already built the envelope
        if isinstance(exc.detail, dict) and {"status", "status_code", "message"}.issubset(exc.detail):
            return JSONResponse(content=exc.detail, status_code=exc.status_code)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(exc.status_code or AppStatusCode.OPERATION_FAILED),
            message=str(exc.detail)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.status_code or 400)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
            message=_validation_message(exc)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=422)

    @app.exception_handler(DataStoreError)
    async def store_exception_handler(request: Request, exc: DataStoreError):
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_ERROR,
            message=exc.message
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=400)

    @app.exception_handler(SagaError)
    async def saga_exception_handler(request: Request, exc: SagaError):
        wrapped = JsonOutResult(
            data={
                "step": exc.step,
                "compensation_errors": [
                    {"step": step, "message": message}
                    for step, message in exc.compensation_errors
                ],
            },
            status="Failure",
            status_code=AppStatusCode.PARTIAL_WRITE_ROLLED_BACK,
            message=exc.message
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=400)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s", request.url.path)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_FAILED,
            message=str(exc)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=500)
