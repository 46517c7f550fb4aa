from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from datetime import datetime

from app.cargohub.core.config import settings
from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.core.metrics import metrics
from app.cargohub.db.models import Transfer, TransferItem
from app.cargohub.repos.ports import ItemCatalog, LocationDirectory, TransferStore
from app.cargohub.repos.transfers import TransferQueryFilters

logger = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class TransferLineInput:
    item_uid: str
    amount: int


@dataclass(frozen=True)
class TransferPatch:
    """Header changes for an existing transfer.

    A field left as ``UNSET`` is not touched. Any other value, ``None``
    included, replaces the stored one.
    """

    reference: str | None | _Unset = UNSET
    from_location_id: int | None | _Unset = UNSET
    to_location_id: int | None | _Unset = UNSET
    status: str | None | _Unset = UNSET

    def changes(self) -> dict[str, object]:
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not UNSET
        }


class TransferLedger:
    def __init__(self, transfers: TransferStore, items: ItemCatalog, locations: LocationDirectory):
        self.transfers = transfers
        self.items = items
        self.locations = locations

    def list_transfers(self, filters: TransferQueryFilters | None = None) -> list[Transfer]:
        return self.transfers.list_transfers(filters or TransferQueryFilters())

    def get_transfer_by_id(self, transfer_id: int) -> Transfer | None:
        return self.transfers.get_transfer(transfer_id)

    def require_transfer(self, transfer_id: int) -> Transfer:
        transfer = self.transfers.get_transfer(transfer_id)
        if transfer is None:
            raise AppError(ErrorCatalog.TRANSFER_NOT_FOUND, details={"transfer_id": transfer_id})
        return transfer

    def list_transfer_items(self, transfer_id: int) -> list[TransferItem]:
        transfer = self.require_transfer(transfer_id)
        return self.transfers.get_lines(transfer.id)

    def create_transfer(
        self,
        *,
        items: list[TransferLineInput],
        reference: str | None = None,
        from_location_id: int | None = None,
        to_location_id: int | None = None,
        status: str | None = None,
    ) -> Transfer:
        if not items:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "Transfer must include at least one item"},
            )
        for line in items:
            self._validate_line(line)
        self._resolve_location(from_location_id, field_name="transfer_from")
        self._resolve_location(to_location_id, field_name="transfer_to")

        now = datetime.utcnow()
        transfer = Transfer(
            reference=reference,
            from_location_id=from_location_id,
            to_location_id=to_location_id,
            status=status or settings.DEFAULT_TRANSFER_STATUS,
            created_at=now,
            updated_at=now,
        )
        lines = [TransferItem(item_uid=line.item_uid, amount=line.amount, created_at=now) for line in items]
        transfer = self.transfers.add_transfer(transfer, lines)
        metrics.increment_transfer_event("create")
        logger.info("Transfer %s created with %d item lines", transfer.id, len(lines))
        return transfer

    def update_transfer(self, transfer_id: int, patch: TransferPatch) -> Transfer:
        transfer = self.require_transfer(transfer_id)
        changes = patch.changes()
        if "status" in changes and not changes["status"]:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "transfer_status cannot be empty"},
            )
        if "from_location_id" in changes:
            self._resolve_location(changes["from_location_id"], field_name="transfer_from")
        if "to_location_id" in changes:
            self._resolve_location(changes["to_location_id"], field_name="transfer_to")

        for attribute, value in changes.items():
            setattr(transfer, attribute, value)
        transfer.updated_at = datetime.utcnow()
        transfer = self.transfers.update(transfer)
        metrics.increment_transfer_event("update")
        logger.info("Transfer %s updated fields=%s", transfer_id, sorted(changes))
        return transfer

    def delete_transfer(self, transfer_id: int) -> None:
        transfer = self.transfers.get_transfer(transfer_id)
        if transfer is None:
            logger.info("Transfer %s not found, nothing to delete", transfer_id)
            return
        self.transfers.delete(transfer)
        metrics.increment_transfer_event("delete")
        logger.info("Transfer %s deleted", transfer_id)

    def commit_transfer(self, transfer_id: int) -> Transfer:
        transfer = self.require_transfer(transfer_id)
        if transfer.status != settings.DEFAULT_TRANSFER_STATUS:
            raise AppError(
                ErrorCatalog.TRANSFER_INVALID_STATE,
                details={
                    "message": f"only {settings.DEFAULT_TRANSFER_STATUS} transfers can be committed",
                    "status": transfer.status,
                },
            )
        transfer.status = settings.COMMITTED_TRANSFER_STATUS
        transfer.updated_at = datetime.utcnow()
        transfer = self.transfers.update(transfer)
        metrics.increment_transfer_event("commit")
        logger.info("Transfer %s committed", transfer_id)
        return transfer

    def _validate_line(self, line: TransferLineInput) -> None:
        if line.amount is None or line.amount <= 0:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"message": "amount must be greater than 0", "item_id": line.item_uid, "amount": line.amount},
            )
        if self.items.find_item_by_uid(line.item_uid) is None:
            raise AppError(
                ErrorCatalog.ITEM_NOT_FOUND,
                details={"message": f"Item with UID {line.item_uid} not found", "item_id": line.item_uid},
            )

    def _resolve_location(self, location_id: int | None, *, field_name: str) -> None:
        if location_id is None:
            return
        if self.locations.find_location_by_id(location_id) is None:
            raise AppError(
                ErrorCatalog.LOCATION_NOT_FOUND,
                details={"message": f"Location with ID {location_id} not found", field_name: location_id},
            )
