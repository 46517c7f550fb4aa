from __future__ import annotations

import logging
from datetime import datetime

from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.core.metrics import metrics
from app.cargohub.db.models import Dock
from app.cargohub.repos.ports import DockStore

logger = logging.getLogger(__name__)

OCCUPIED = "occupied"
UNOCCUPIED = "unoccupied"


def occupancy_status(shipment_id: int) -> str:
    return OCCUPIED if shipment_id > 0 else UNOCCUPIED


def dock_label(index: int) -> str:
    """Spreadsheet-style dock letter for a zero-based index: 0 -> A, 25 -> Z, 26 -> AA."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


class DockTracker:
    def __init__(self, docks: DockStore):
        self.docks = docks

    def list_docks(self) -> list[Dock]:
        return self.docks.list_docks()

    def get_dock_by_id(self, dock_id: int) -> Dock | None:
        return self.docks.get_dock(dock_id)

    def create_dock(self, *, warehouse_id: int, name: str | None = None) -> Dock:
        if warehouse_id is None or warehouse_id <= 0:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "warehouse_id is required when creating a dock", "warehouse_id": warehouse_id},
            )
        if not name or not name.strip():
            name = f"Dock {dock_label(self.docks.count())}"
        dock = Dock(
            name=name,
            warehouse_id=warehouse_id,
            shipment_id=0,
            status=UNOCCUPIED,
            created_at=datetime.utcnow(),
        )
        dock = self.docks.create(dock)
        metrics.increment_dock_event("create")
        logger.info("Dock %s (%s) created for warehouse %s", dock.id, dock.name, warehouse_id)
        return dock

    def update_dock(self, dock_id: int, *, name: str, shipment_id: int) -> bool:
        if shipment_id < 0:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "shipment_id cannot be negative", "shipment_id": shipment_id},
            )
        dock = self.docks.get_dock(dock_id)
        if dock is None:
            return False
        dock.name = name
        dock.shipment_id = shipment_id
        dock.status = occupancy_status(shipment_id)
        dock.updated_at = datetime.utcnow()
        self.docks.update(dock)
        metrics.increment_dock_event("update")
        logger.info("Dock %s is %s (shipment %s)", dock_id, dock.status, shipment_id)
        return True

    def clear_dock(self, dock_id: int) -> bool:
        dock = self.docks.get_dock(dock_id)
        if dock is None:
            return False
        dock.shipment_id = 0
        dock.status = UNOCCUPIED
        dock.updated_at = datetime.utcnow()
        self.docks.update(dock)
        metrics.increment_dock_event("clear")
        logger.info("Dock %s cleared", dock_id)
        return True

    def delete_dock(self, dock_id: int) -> bool:
        dock = self.docks.get_dock(dock_id)
        if dock is None:
            return False
        self.docks.delete(dock)
        metrics.increment_dock_event("delete")
        logger.info("Dock %s deleted", dock_id)
        return True
