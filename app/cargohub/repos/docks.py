from sqlalchemy import func, select

from app.cargohub.db.models import Dock


class DockRepository:
    def __init__(self, db):
        self.db = db

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Dock)).scalar_one()

    def list_docks(self) -> list[Dock]:
        return list(self.db.execute(select(Dock).order_by(Dock.id.asc())).scalars().all())

    def get_dock(self, dock_id: int) -> Dock | None:
        return self.db.get(Dock, dock_id)

    def create(self, dock: Dock) -> Dock:
        self.db.add(dock)
        self.db.commit()
        self.db.refresh(dock)
        return dock

    def update(self, dock: Dock) -> Dock:
        self.db.add(dock)
        self.db.commit()
        self.db.refresh(dock)
        return dock

    def delete(self, dock: Dock) -> None:
        self.db.delete(dock)
        self.db.commit()
