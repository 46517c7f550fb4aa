from datetime import datetime

from pydantic import BaseModel, Field

from app.cargohub.schemas.common import MAX_DB_INT, DbInt


class DockCreateRequest(BaseModel):
    name: str | None = None
    warehouse_id: DbInt


class DockUpdateRequest(BaseModel):
    name: str
    shipment_id: int = Field(default=0, ge=0, le=MAX_DB_INT)


class DockResponse(BaseModel):
    id: int
    name: str
    status: str
    shipment_id: int
    warehouse_id: int
    created_at: datetime
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class DockActionResponse(BaseModel):
    message: str
