from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from sqlalchemy import select

from app.cargohub.db.models import Transfer, TransferItem

logger = logging.getLogger(__name__)

TransferSortField = Literal[
    "id",
    "reference",
    "transfer_from",
    "transfer_to",
    "transfer_status",
    "created_at",
    "updated_at",
]
SortDirection = Literal["asc", "desc"]

# wire name -> Transfer attribute
TRANSFER_SORT_ATTRIBUTES: dict[str, str] = {
    "id": "id",
    "reference": "reference",
    "transfer_from": "from_location_id",
    "transfer_to": "to_location_id",
    "transfer_status": "status",
    "created_at": "created_at",
    "updated_at": "updated_at",
}


@dataclass(frozen=True)
class TransferQueryFilters:
    reference: str | None = None
    status: str | None = None
    from_location_id: int | None = None
    to_location_id: int | None = None
    sort_by: TransferSortField = "id"
    sort_dir: SortDirection = "asc"


class TransferRepository:
    def __init__(self, db):
        self.db = db

    def list_transfers(self, filters: TransferQueryFilters) -> list[Transfer]:
        query = select(Transfer)
        if filters.reference:
            query = query.where(Transfer.reference.ilike(f"%{filters.reference.strip()}%"))
        if filters.status:
            query = query.where(Transfer.status.ilike(f"%{filters.status.strip()}%"))
        if filters.from_location_id is not None:
            query = query.where(Transfer.from_location_id == filters.from_location_id)
        if filters.to_location_id is not None:
            query = query.where(Transfer.to_location_id == filters.to_location_id)

        sort_column = self._resolve_sort_column(filters.sort_by)
        ordering = sort_column.desc() if filters.sort_dir == "desc" else sort_column.asc()
        query = query.order_by(ordering, Transfer.id.asc())
        return list(self.db.execute(query).scalars().all())

    def get_transfer(self, transfer_id: int) -> Transfer | None:
        return self.db.get(Transfer, transfer_id)

    def get_lines(self, transfer_id: int) -> list[TransferItem]:
        return list(
            self.db.execute(
                select(TransferItem).where(TransferItem.transfer_id == transfer_id).order_by(TransferItem.id)
            )
            .scalars()
            .all()
        )

    def add_transfer(self, transfer: Transfer, lines: list[TransferItem]) -> Transfer:
        """Persist a header and its lines in one transaction.

        The header is flushed first to obtain its id; any failure while the
        lines are written rolls the header back with them.
        """
        try:
            self.db.add(transfer)
            self.db.flush()
            for line in lines:
                line.transfer_id = transfer.id
            self.db.add_all(lines)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.warning("Rolled back transfer header after a failed line insert")
            raise
        self.db.refresh(transfer)
        return transfer

    def update(self, transfer: Transfer) -> Transfer:
        self.db.add(transfer)
        self.db.commit()
        self.db.refresh(transfer)
        return transfer

    def delete(self, transfer: Transfer) -> None:
        self.db.delete(transfer)
        self.db.commit()

    @staticmethod
    def _resolve_sort_column(sort_by: str):
        attribute = TRANSFER_SORT_ATTRIBUTES.get(sort_by, "id")
        return getattr(Transfer, attribute)
