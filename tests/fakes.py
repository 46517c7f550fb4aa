"""In-memory stores satisfying the repository protocols, for service-level tests."""
from __future__ import annotations

import itertools

from app.cargohub.db.models import Dock, Item, Location, Transfer, TransferItem
from app.cargohub.repos.transfers import TRANSFER_SORT_ATTRIBUTES, TransferQueryFilters


class FakeItemCatalog:
    def __init__(self, *uids: str):
        self.items = {uid: Item(uid=uid, code=f"CODE-{uid}", description=uid) for uid in uids}

    def find_item_by_uid(self, uid: str) -> Item | None:
        return self.items.get(uid)


class FakeLocationDirectory:
    def __init__(self, *location_ids: int):
        self.locations = {
            location_id: Location(
                id=location_id, warehouse_id=1, code=f"L{location_id}", row="A", rack="1", shelf=str(location_id)
            )
            for location_id in location_ids
        }

    def find_location_by_id(self, location_id: int) -> Location | None:
        return self.locations.get(location_id)


class FakeTransferStore:
    def __init__(self):
        self.transfers: dict[int, Transfer] = {}
        self._ids = itertools.count(1)
        self._line_ids = itertools.count(1)

    def list_transfers(self, filters: TransferQueryFilters) -> list[Transfer]:
        rows = list(self.transfers.values())
        if filters.reference:
            needle = filters.reference.lower()
            rows = [row for row in rows if row.reference and needle in row.reference.lower()]
        if filters.status:
            needle = filters.status.lower()
            rows = [row for row in rows if row.status and needle in row.status.lower()]
        if filters.from_location_id is not None:
            rows = [row for row in rows if row.from_location_id == filters.from_location_id]
        if filters.to_location_id is not None:
            rows = [row for row in rows if row.to_location_id == filters.to_location_id]
        attribute = TRANSFER_SORT_ATTRIBUTES[filters.sort_by]
        rows.sort(key=lambda row: row.id)
        # nulls sort after values ascending
        rows.sort(
            key=lambda row: (getattr(row, attribute) is None, getattr(row, attribute)),
            reverse=filters.sort_dir == "desc",
        )
        return rows

    def get_transfer(self, transfer_id: int) -> Transfer | None:
        return self.transfers.get(transfer_id)

    def get_lines(self, transfer_id: int) -> list[TransferItem]:
        transfer = self.transfers.get(transfer_id)
        return list(transfer.items) if transfer is not None else []

    def add_transfer(self, transfer: Transfer, lines: list[TransferItem]) -> Transfer:
        transfer.id = next(self._ids)
        for line in lines:
            line.id = next(self._line_ids)
            line.transfer_id = transfer.id
        transfer.items = lines
        self.transfers[transfer.id] = transfer
        return transfer

    def update(self, transfer: Transfer) -> Transfer:
        self.transfers[transfer.id] = transfer
        return transfer

    def delete(self, transfer: Transfer) -> None:
        self.transfers.pop(transfer.id, None)


class FakeDockStore:
    def __init__(self):
        self.docks: dict[int, Dock] = {}
        self._ids = itertools.count(1)

    def count(self) -> int:
        return len(self.docks)

    def list_docks(self) -> list[Dock]:
        return [self.docks[key] for key in sorted(self.docks)]

    def get_dock(self, dock_id: int) -> Dock | None:
        return self.docks.get(dock_id)

    def create(self, dock: Dock) -> Dock:
        dock.id = next(self._ids)
        self.docks[dock.id] = dock
        return dock

    def update(self, dock: Dock) -> Dock:
        self.docks[dock.id] = dock
        return dock

    def delete(self, dock: Dock) -> None:
        self.docks.pop(dock.id, None)
