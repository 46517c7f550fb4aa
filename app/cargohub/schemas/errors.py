from pydantic import BaseModel


class ApiErrorResponse(BaseModel):
    code: str
    message: str
    details: dict | None = None
    trace_id: str | None = None


class ApiValidationErrorItem(BaseModel):
    field: str | None = None
    message: str
    type: str
    loc: list[str | int] | None = None


class ApiValidationErrorDetails(BaseModel):
    errors: list[ApiValidationErrorItem]


class ApiValidationErrorResponse(ApiErrorResponse):
    details: ApiValidationErrorDetails | dict | None = None


NOT_FOUND_RESPONSE = {404: {"model": ApiErrorResponse, "description": "Referenced record not found"}}
CONFLICT_RESPONSE = {409: {"model": ApiErrorResponse, "description": "Conflicting state"}}
VALIDATION_RESPONSE = {422: {"model": ApiValidationErrorResponse, "description": "Validation error"}}
