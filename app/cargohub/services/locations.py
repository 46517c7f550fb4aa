import logging
from datetime import datetime

from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.db.models import Location
from app.cargohub.repos.locations import LocationRepository

logger = logging.getLogger(__name__)

_SLOT_FIELDS = ("code", "row", "rack", "shelf")


class LocationService:
    def __init__(self, repo: LocationRepository):
        self.repo = repo

    def list_locations(self, *, warehouse_id: int | None = None, code: str | None = None) -> list[Location]:
        return self.repo.list_locations(warehouse_id=warehouse_id, code=code)

    def get_location(self, location_id: int) -> Location:
        location = self.repo.find_location_by_id(location_id)
        if location is None:
            raise AppError(ErrorCatalog.LOCATION_NOT_FOUND, details={"location_id": location_id})
        return location

    def create_location(self, *, warehouse_id: int, code: str, row: str, rack: str, shelf: str) -> Location:
        if warehouse_id <= 0:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "warehouse_id must be greater than 0", "warehouse_id": warehouse_id},
            )
        values = {"code": code, "row": row, "rack": rack, "shelf": shelf}
        blank = [name for name in _SLOT_FIELDS if not (values[name] or "").strip()]
        if blank:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "code, row, rack and shelf are required", "fields": blank},
            )
        if self.repo.find_by_slot(warehouse_id, row, rack, shelf) is not None:
            raise AppError(
                ErrorCatalog.LOCATION_DUPLICATE,
                details={"warehouse_id": warehouse_id, "row": row, "rack": rack, "shelf": shelf},
            )
        now = datetime.utcnow()
        location = self.repo.create(
            Location(warehouse_id=warehouse_id, created_at=now, updated_at=now, **values)
        )
        logger.info("Location %s (%s) created in warehouse %s", location.id, code, warehouse_id)
        return location

    def delete_location(self, location_id: int) -> None:
        location = self.repo.find_location_by_id(location_id)
        if location is None:
            return
        if self.repo.is_referenced(location_id):
            raise AppError(ErrorCatalog.LOCATION_IN_USE, details={"location_id": location_id})
        self.repo.delete(location)
        logger.info("Location %s deleted", location_id)
