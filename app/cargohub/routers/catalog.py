from fastapi import APIRouter, Depends, Query, Response

from app.cargohub.core.deps import get_item_service, get_location_service
from app.cargohub.schemas.catalog import ItemCreateRequest, ItemResponse, LocationCreateRequest, LocationResponse
from app.cargohub.schemas.common import MAX_DB_INT, RecordId
from app.cargohub.schemas.errors import CONFLICT_RESPONSE, NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from app.cargohub.services.items import ItemService
from app.cargohub.services.locations import LocationService

router = APIRouter()


@router.get("/items", response_model=list[ItemResponse])
def list_items(
    search: str | None = Query(None, description="Substring match on code or description"),
    service: ItemService = Depends(get_item_service),
):
    return service.list_items(search=search)


@router.get("/items/{uid}", response_model=ItemResponse, responses=NOT_FOUND_RESPONSE)
def get_item(uid: str, service: ItemService = Depends(get_item_service)):
    return service.get_item(uid)


@router.post(
    "/items",
    response_model=ItemResponse,
    status_code=201,
    responses={**CONFLICT_RESPONSE, **VALIDATION_RESPONSE},
)
def create_item(payload: ItemCreateRequest, service: ItemService = Depends(get_item_service)):
    return service.create_item(payload.model_dump())


@router.delete("/items/{uid}", status_code=204, responses=CONFLICT_RESPONSE)
def delete_item(uid: str, service: ItemService = Depends(get_item_service)):
    service.delete_item(uid)
    return Response(status_code=204)


@router.get("/locations", response_model=list[LocationResponse])
def list_locations(
    warehouse_id: int | None = Query(None, le=MAX_DB_INT),
    code: str | None = Query(None),
    service: LocationService = Depends(get_location_service),
):
    return service.list_locations(warehouse_id=warehouse_id, code=code)


@router.get("/locations/{location_id}", response_model=LocationResponse, responses=NOT_FOUND_RESPONSE)
def get_location(location_id: RecordId, service: LocationService = Depends(get_location_service)):
    return service.get_location(location_id)


@router.post(
    "/locations",
    response_model=LocationResponse,
    status_code=201,
    responses={**CONFLICT_RESPONSE, **VALIDATION_RESPONSE},
)
def create_location(payload: LocationCreateRequest, service: LocationService = Depends(get_location_service)):
    return service.create_location(**payload.model_dump())


@router.delete("/locations/{location_id}", status_code=204, responses=CONFLICT_RESPONSE)
def delete_location(location_id: RecordId, service: LocationService = Depends(get_location_service)):
    service.delete_location(location_id)
    return Response(status_code=204)
