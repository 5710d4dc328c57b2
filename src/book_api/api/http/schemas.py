"""Wire models shared by the HTTP routers."""

from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import JSONResponse


class ErrorModel(BaseModel):
    """Structured error body returned by the book endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(alias="Error", description="Machine readable error code")
    error_message: str = Field(
        alias="ErrorMessage", description="Human readable explanation"
    )


def error_response(status_code: int, error: str, error_message: str) -> JSONResponse:
    """Build a JSON response carrying an ``ErrorModel`` body."""
    body = ErrorModel(error=error, error_message=error_message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))
