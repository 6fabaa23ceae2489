from fastapi import HTTPException, Response, status
from pydantic import ValidationError

from farmbooks.schemas.common import ApiResponse
from farmbooks.services.common import ServiceResponse


def render(result: ServiceResponse, response: Response) -> ApiResponse:
    """Write a service outcome as the ``{message, data}`` envelope."""
    response.status_code = result.status_code
    return ApiResponse(message=result.message, data=result.data)


def bad_request(error: ValidationError) -> HTTPException:
    """Turn a filter validation failure into a 400."""
    messages = [err["msg"].removeprefix("Value error, ") for err in error.errors()]
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="; ".join(messages))
