import json

from sqlalchemy import select

from app.cargohub.db.models import RequestLog


def _latest_entries(db_session, limit: int = 50) -> list[RequestLog]:
    stmt = select(RequestLog).order_by(RequestLog.id.desc()).limit(limit)
    return list(db_session.execute(stmt).scalars().all())


def test_requests_are_persisted_with_trace_id(client, db_session):
    response = client.post(
        "/api/docks",
        json={"warehouse_id": 1},
        headers={"x-api-key": "dock-key", "X-Trace-ID": "trace-dock-1"},
    )

    assert response.headers["X-Trace-ID"] == "trace-dock-1"
    entry = _latest_entries(db_session, limit=1)[0]
    assert entry.api_key == "dock-key"
    assert entry.method == "POST"
    assert entry.path == "/api/docks"
    assert entry.status_code == 201
    assert entry.trace_id == "trace-dock-1"
    assert json.loads(entry.request_body) == {"warehouse_id": 1}


def test_failed_requests_are_persisted_without_api_key(client, db_session):
    client.get("/api/transfers/12345")

    entry = _latest_entries(db_session, limit=1)[0]
    assert entry.api_key == "Unknown"
    assert entry.status_code == 404
    assert entry.request_body is None


def test_health_checks_are_not_persisted(client, db_session):
    client.get("/health")
    client.get("/ready")

    assert _latest_entries(db_session) == []


def test_request_body_is_truncated(client, db_session, monkeypatch):
    from app.cargohub.services import request_log

    monkeypatch.setattr(request_log.settings, "REQUEST_LOG_MAX_BODY", 10)

    client.post("/api/docks", json={"warehouse_id": 1, "name": "A very long dock name"})

    entry = _latest_entries(db_session, limit=1)[0]
    assert len(entry.request_body) == 10
