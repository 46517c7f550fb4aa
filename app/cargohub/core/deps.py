from fastapi import Depends, Request

from app.cargohub.core.config import settings
from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.db.session import get_db
from app.cargohub.repos.docks import DockRepository
from app.cargohub.repos.items import ItemRepository
from app.cargohub.repos.locations import LocationRepository
from app.cargohub.repos.transfers import TransferRepository
from app.cargohub.services.docks import DockTracker
from app.cargohub.services.items import ItemService
from app.cargohub.services.locations import LocationService
from app.cargohub.services.transfers import TransferLedger


def require_api_key(request: Request) -> str | None:
    api_key = request.headers.get(settings.API_KEY_HEADER)
    if not settings.API_KEY_REQUIRED:
        return api_key
    if not api_key or api_key not in settings.API_KEYS:
        raise AppError(ErrorCatalog.INVALID_API_KEY, details={"header": settings.API_KEY_HEADER})
    return api_key


def get_transfer_ledger(db=Depends(get_db)) -> TransferLedger:
    return TransferLedger(
        transfers=TransferRepository(db),
        items=ItemRepository(db),
        locations=LocationRepository(db),
    )


def get_dock_tracker(db=Depends(get_db)) -> DockTracker:
    return DockTracker(DockRepository(db))


def get_item_service(db=Depends(get_db)) -> ItemService:
    return ItemService(ItemRepository(db))


def get_location_service(db=Depends(get_db)) -> LocationService:
    return LocationService(LocationRepository(db))
