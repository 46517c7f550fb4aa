from fastapi import APIRouter, Depends, Response

from app.cargohub.core.deps import get_dock_tracker
from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.schemas.common import RecordId
from app.cargohub.schemas.docks import DockActionResponse, DockCreateRequest, DockResponse, DockUpdateRequest
from app.cargohub.schemas.errors import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from app.cargohub.services.docks import DockTracker

router = APIRouter()


def _dock_not_found(dock_id: int) -> AppError:
    return AppError(ErrorCatalog.DOCK_NOT_FOUND, details={"dock_id": dock_id})


@router.post("/docks", response_model=DockResponse, status_code=201, responses=VALIDATION_RESPONSE)
def create_dock(payload: DockCreateRequest, tracker: DockTracker = Depends(get_dock_tracker)):
    return tracker.create_dock(name=payload.name, warehouse_id=payload.warehouse_id)


@router.put(
    "/docks/{dock_id}",
    response_model=DockActionResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_dock(dock_id: RecordId, payload: DockUpdateRequest, tracker: DockTracker = Depends(get_dock_tracker)):
    if not tracker.update_dock(dock_id, name=payload.name, shipment_id=payload.shipment_id):
        raise _dock_not_found(dock_id)
    return DockActionResponse(message="Dock updated successfully.")


@router.put("/docks/{dock_id}/clear", response_model=DockActionResponse, responses=NOT_FOUND_RESPONSE)
def clear_dock(dock_id: RecordId, tracker: DockTracker = Depends(get_dock_tracker)):
    if not tracker.clear_dock(dock_id):
        raise _dock_not_found(dock_id)
    return DockActionResponse(message="Dock cleared successfully.")


@router.get("/docks", response_model=list[DockResponse])
def list_docks(tracker: DockTracker = Depends(get_dock_tracker)):
    return tracker.list_docks()


@router.get("/docks/{dock_id}", response_model=DockResponse, responses=NOT_FOUND_RESPONSE)
def get_dock(dock_id: RecordId, tracker: DockTracker = Depends(get_dock_tracker)):
    dock = tracker.get_dock_by_id(dock_id)
    if dock is None:
        raise _dock_not_found(dock_id)
    return dock


@router.delete("/docks/{dock_id}", status_code=204)
def delete_dock(dock_id: RecordId, tracker: DockTracker = Depends(get_dock_tracker)):
    tracker.delete_dock(dock_id)
    return Response(status_code=204)
