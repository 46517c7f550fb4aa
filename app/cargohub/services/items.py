import logging
from datetime import datetime

from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.db.models import Item
from app.cargohub.repos.items import ItemRepository

logger = logging.getLogger(__name__)


class ItemService:
    def __init__(self, repo: ItemRepository):
        self.repo = repo

    def list_items(self, *, search: str | None = None) -> list[Item]:
        return self.repo.list_items(search=search)

    def get_item(self, uid: str) -> Item:
        item = self.repo.find_item_by_uid(uid)
        if item is None:
            raise AppError(ErrorCatalog.ITEM_NOT_FOUND, details={"item_id": uid})
        return item

    def create_item(self, values: dict) -> Item:
        uid = values["uid"]
        if self.repo.find_item_by_uid(uid) is not None:
            raise AppError(ErrorCatalog.ITEM_ALREADY_EXISTS, details={"item_id": uid})
        now = datetime.utcnow()
        item = self.repo.create(Item(**values, created_at=now, updated_at=now))
        logger.info("Item %s created", uid)
        return item

    def delete_item(self, uid: str) -> None:
        item = self.repo.find_item_by_uid(uid)
        if item is None:
            return
        if self.repo.is_referenced(uid):
            raise AppError(ErrorCatalog.ITEM_IN_USE, details={"item_id": uid})
        self.repo.delete(item)
        logger.info("Item %s deleted", uid)
