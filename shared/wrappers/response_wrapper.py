from starlette.middleware.base import BaseHTTPMiddleware
from fastapi.responses import JSONResponse
from fastapi import Request
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode
from typing import Callable
import json

SUCCESS_MESSAGES = {
    "POST": ("Created successfully", AppStatusCode.CREATED_SUCCESSFULLY),
    "PUT": ("Updated successfully", AppStatusCode.UPDATED_SUCCESSFULLY),
}


class JsonResponseMiddleware(BaseHTTPMiddleware):
    """Wrap successful JSON bodies in the {data, status, status_code, message} envelope.

    Error bodies are produced already wrapped by the exception handlers.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        response = await call_next(request)

        if not (200 <= response.status_code < 400):
            return response
        if "application/json" not in response.headers.get("content-type", ""):
            return response

        # Read the full body
        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        headers = {k: v for k, v in response.headers.items()
                   if k.lower() != "content-length"}

        try:
            data = json.loads(body_bytes.decode("utf-8"))
        except ValueError:
            return JSONResponse(content=None, status_code=response.status_code, headers=headers)

        # Skip wrapping if already wrapped
        if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
            return JSONResponse(content=data, status_code=response.status_code, headers=headers)

        message, status_code = SUCCESS_MESSAGES.get(
            request.method,
            ("Data retrieved successfully", AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY),
        )
        wrapped = JsonOutResult(
            data=data,
            status="Success",
            status_code=status_code,
            message=message
        ).model_dump()

        return JSONResponse(content=wrapped, status_code=response.status_code, headers=headers)
