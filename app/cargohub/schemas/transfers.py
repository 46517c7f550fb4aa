from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.cargohub.schemas.common import MAX_DB_INT, DbInt


_TRANSFER_CREATE_EXAMPLE = {
    "reference": "TRF001",
    "transfer_from": 1,
    "transfer_to": 2,
    "transfer_status": "Pending",
    "items": [
        {"item_id": "UID001", "amount": 10},
        {"item_id": "UID002", "amount": 5},
    ],
}


class TransferItemRequest(BaseModel):
    item_id: str = Field(min_length=1)
    amount: int = Field(gt=0, le=MAX_DB_INT)


class TransferItemResponse(BaseModel):
    item_id: str
    amount: int


class TransferCreateRequest(BaseModel):
    reference: str | None = None
    transfer_from: DbInt | None = None
    transfer_to: DbInt | None = None
    transfer_status: str | None = None
    items: list[TransferItemRequest]

    model_config = {"json_schema_extra": {"example": _TRANSFER_CREATE_EXAMPLE}}


class TransferUpdateRequest(BaseModel):
    """Header fields only; fields missing from the body are left unchanged."""

    reference: str | None = None
    transfer_from: DbInt | None = None
    transfer_to: DbInt | None = None
    transfer_status: str | None = None


class TransferResponse(BaseModel):
    id: int
    reference: str | None
    transfer_from: int | None
    transfer_to: int | None
    transfer_status: str | None
    created_at: datetime
    updated_at: datetime
    items: list[TransferItemResponse]
