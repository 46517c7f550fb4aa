from app.cargohub.db.models import RequestLog


class RequestLogRepository:
    def __init__(self, db):
        self.db = db

    def create(self, entry: RequestLog) -> RequestLog:
        self.db.add(entry)
        self.db.commit()
        return entry
