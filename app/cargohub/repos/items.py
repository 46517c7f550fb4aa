from __future__ import annotations

from sqlalchemy import or_, select

from app.cargohub.db.models import Item, TransferItem


class ItemRepository:
    def __init__(self, db):
        self.db = db

    def find_item_by_uid(self, uid: str) -> Item | None:
        return self.db.get(Item, uid)

    def list_items(self, *, search: str | None = None) -> list[Item]:
        stmt = select(Item)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(or_(Item.code.ilike(pattern), Item.description.ilike(pattern)))
        return list(self.db.execute(stmt.order_by(Item.uid.asc())).scalars().all())

    def is_referenced(self, uid: str) -> bool:
        stmt = select(TransferItem.id).where(TransferItem.item_uid == uid).limit(1)
        return self.db.execute(stmt).first() is not None

    def create(self, item: Item) -> Item:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item: Item) -> None:
        self.db.delete(item)
        self.db.commit()
