# shared/helpers/json_response_helper.py
from fastapi import HTTPException
from typing import Any

from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import JsonOutResult, NotFoundDetail


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400, data: Any = None):
    raise HTTPException(
        status_code=http_status,
        detail=JsonOutResult(
            data=data,
            status="Failure",
            status_code=status_code,
            message=message
        ).model_dump(mode="json")
    )


def not_found_response(entity: str, list_url: str, entity_id: Any = None):
    """404 carrying a link back to the list the detail was opened from."""
    return error_response(
        message=f"{entity} not found",
        status_code=AppStatusCode.NOT_FOUND,
        http_status=404,
        data=NotFoundDetail(list_url=list_url, id=str(entity_id) if entity_id else None).model_dump(),
    )
