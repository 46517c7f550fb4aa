from __future__ import annotations

from sqlalchemy import or_, select

from app.cargohub.db.models import Location, Transfer


class LocationRepository:
    def __init__(self, db):
        self.db = db

    def find_location_by_id(self, location_id: int) -> Location | None:
        return self.db.get(Location, location_id)

    def find_by_slot(self, warehouse_id: int, row: str, rack: str, shelf: str) -> Location | None:
        stmt = select(Location).where(
            Location.warehouse_id == warehouse_id,
            Location.row == row,
            Location.rack == rack,
            Location.shelf == shelf,
        )
        return self.db.execute(stmt).scalars().first()

    def list_locations(self, *, warehouse_id: int | None = None, code: str | None = None) -> list[Location]:
        stmt = select(Location)
        if warehouse_id is not None:
            stmt = stmt.where(Location.warehouse_id == warehouse_id)
        if code:
            stmt = stmt.where(Location.code.ilike(f"%{code.strip()}%"))
        return list(self.db.execute(stmt.order_by(Location.id.asc())).scalars().all())

    def is_referenced(self, location_id: int) -> bool:
        stmt = (
            select(Transfer.id)
            .where(or_(Transfer.from_location_id == location_id, Transfer.to_location_id == location_id))
            .limit(1)
        )
        return self.db.execute(stmt).first() is not None

    def create(self, location: Location) -> Location:
        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        return location

    def delete(self, location: Location) -> None:
        self.db.delete(location)
        self.db.commit()
