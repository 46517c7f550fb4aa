from dataclasses import dataclass
from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    INVALID_API_KEY = ErrorDefinition("INVALID_API_KEY", "Invalid or missing API key", status.HTTP_401_UNAUTHORIZED)
    VALIDATION_ERROR = ErrorDefinition(
        "VALIDATION_ERROR",
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    TRANSFER_NOT_FOUND = ErrorDefinition(
        "TRANSFER_NOT_FOUND",
        "Transfer not found",
        status.HTTP_404_NOT_FOUND,
    )
    ITEM_NOT_FOUND = ErrorDefinition(
        "ITEM_NOT_FOUND",
        "Item not found",
        status.HTTP_404_NOT_FOUND,
    )
    LOCATION_NOT_FOUND = ErrorDefinition(
        "LOCATION_NOT_FOUND",
        "Location not found",
        status.HTTP_404_NOT_FOUND,
    )
    DOCK_NOT_FOUND = ErrorDefinition(
        "DOCK_NOT_FOUND",
        "Dock not found",
        status.HTTP_404_NOT_FOUND,
    )
    TRANSFER_INVALID_STATE = ErrorDefinition(
        "TRANSFER_INVALID_STATE",
        "Transfer cannot be changed in its current status",
        status.HTTP_409_CONFLICT,
    )
    ITEM_ALREADY_EXISTS = ErrorDefinition(
        "ITEM_ALREADY_EXISTS",
        "Item uid already exists",
        status.HTTP_409_CONFLICT,
    )
    ITEM_IN_USE = ErrorDefinition(
        "ITEM_IN_USE",
        "Item is referenced by transfers",
        status.HTTP_409_CONFLICT,
    )
    LOCATION_DUPLICATE = ErrorDefinition(
        "LOCATION_DUPLICATE",
        "A location with the same row, rack and shelf already exists in this warehouse",
        status.HTTP_409_CONFLICT,
    )
    LOCATION_IN_USE = ErrorDefinition(
        "LOCATION_IN_USE",
        "Location is referenced by transfers",
        status.HTTP_409_CONFLICT,
    )
    DB_UNAVAILABLE = ErrorDefinition(
        "DB_UNAVAILABLE",
        "Database unavailable",
        status.HTTP_503_SERVICE_UNAVAILABLE,
    )
    LOCK_TIMEOUT = ErrorDefinition(
        "LOCK_TIMEOUT",
        "Lock wait timeout",
        status.HTTP_409_CONFLICT,
    )
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code
