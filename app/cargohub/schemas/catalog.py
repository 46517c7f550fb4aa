from datetime import datetime

from pydantic import BaseModel, Field

from app.cargohub.schemas.common import MAX_DB_INT, DbInt


class ItemCreateRequest(BaseModel):
    uid: str = Field(min_length=1, max_length=64)
    code: str = Field(min_length=1)
    description: str = Field(min_length=1)
    short_description: str | None = None
    upc_code: str | None = None
    model_number: str | None = None
    commodity_code: str | None = None
    supplier_code: str | None = None
    supplier_part_number: str | None = None
    unit_purchase_quantity: int = Field(default=0, ge=0, le=MAX_DB_INT)
    unit_order_quantity: int = Field(default=0, ge=0, le=MAX_DB_INT)
    pack_order_quantity: int = Field(default=0, ge=0, le=MAX_DB_INT)


class ItemResponse(ItemCreateRequest):
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LocationCreateRequest(BaseModel):
    warehouse_id: DbInt
    code: str
    row: str
    rack: str
    shelf: str


class LocationResponse(LocationCreateRequest):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
