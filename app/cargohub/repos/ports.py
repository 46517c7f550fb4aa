"""Persistence ports consumed by the services.

The SQLAlchemy repositories in this package implement these protocols; tests
swap in in-memory fakes.
"""
from __future__ import annotations

from typing import Protocol

from app.cargohub.db.models import Dock, Item, Location, Transfer, TransferItem
from app.cargohub.repos.transfers import TransferQueryFilters


class ItemCatalog(Protocol):
    def find_item_by_uid(self, uid: str) -> Item | None:
        ...


class LocationDirectory(Protocol):
    def find_location_by_id(self, location_id: int) -> Location | None:
        ...


class TransferStore(Protocol):
    def list_transfers(self, filters: TransferQueryFilters) -> list[Transfer]:
        ...

    def get_transfer(self, transfer_id: int) -> Transfer | None:
        ...

    def get_lines(self, transfer_id: int) -> list[TransferItem]:
        ...

    def add_transfer(self, transfer: Transfer, lines: list[TransferItem]) -> Transfer:
        ...

    def update(self, transfer: Transfer) -> Transfer:
        ...

    def delete(self, transfer: Transfer) -> None:
        ...


class DockStore(Protocol):
    def count(self) -> int:
        ...

    def list_docks(self) -> list[Dock]:
        ...

    def get_dock(self, dock_id: int) -> Dock | None:
        ...

    def create(self, dock: Dock) -> Dock:
        ...

    def update(self, dock: Dock) -> Dock:
        ...

    def delete(self, dock: Dock) -> None:
        ...
