from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Dict, List

from src.core.waitlist.normalizer import REQUIRED_MESSAGE
from src.utils.logger import get_logger

logger = get_logger(__name__)

NON_FIELD_ERRORS = "non_field_errors"

def _message_for(error: Dict) -> str:
    if error["type"] == "missing":
        return REQUIRED_MESSAGE
    if error["type"] in ("model_attributes_type", "dict_type"):
        return "Invalid data. Expected a dictionary."
    return error["msg"]

async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report request validation failures as 400 with `{field: [messages]}`,
    the same shape the waitlist operations use, instead of FastAPI's 422.
    """
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "JSON parse error."}
        )

    content: Dict[str, List[str]] = {}
    for error in errors:
        loc = [part for part in error["loc"] if part != "body"]
        field = str(loc[0]) if loc else NON_FIELD_ERRORS
        content.setdefault(field, []).append(_message_for(error))

    logger.info(f"Rejected request to {request.url.path}: {list(content)}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)
