from app.cargohub.db.models import Transfer, TransferItem


def _transfer_payload(**overrides):
    payload = {
        "reference": "TRF001",
        "transfer_from": 1,
        "transfer_to": 2,
        "transfer_status": "Pending",
        "items": [
            {"item_id": "UID001", "amount": 10},
            {"item_id": "UID002", "amount": 5},
        ],
    }
    payload.update(overrides)
    return payload


def _create(client, **overrides):
    response = client.post("/api/transfers", json=_transfer_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_fetch_transfer(client, seed_catalog):
    created = _create(client)

    response = client.get(f"/api/transfers/{created['id']}")

    assert response.status_code == 200
    payload = response.json()
    assert payload["reference"] == "TRF001"
    assert payload["transfer_from"] == 1
    assert payload["transfer_to"] == 2
    assert payload["transfer_status"] == "Pending"
    assert payload["items"] == [
        {"item_id": "UID001", "amount": 10},
        {"item_id": "UID002", "amount": 5},
    ]
    assert payload["created_at"] == payload["updated_at"]


def test_create_transfer_defaults_status(client, seed_catalog):
    payload = _transfer_payload()
    del payload["transfer_status"]

    response = client.post("/api/transfers", json=payload)

    assert response.status_code == 201
    assert response.json()["transfer_status"] == "Pending"


def test_create_transfer_with_unknown_item_writes_nothing(client, seed_catalog, db_session):
    response = client.post(
        "/api/transfers",
        json=_transfer_payload(items=[{"item_id": "UID001", "amount": 1}, {"item_id": "NOPE", "amount": 1}]),
    )

    assert response.status_code == 404
    assert response.json()["code"] == "ITEM_NOT_FOUND"
    assert db_session.query(Transfer).count() == 0
    assert db_session.query(TransferItem).count() == 0


def test_create_transfer_with_zero_amount_is_rejected(client, seed_catalog, db_session):
    response = client.post(
        "/api/transfers",
        json=_transfer_payload(items=[{"item_id": "UID001", "amount": 0}]),
    )

    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["trace_id"]
    assert db_session.query(Transfer).count() == 0


def test_create_transfer_with_unknown_location_is_rejected(client, seed_catalog):
    response = client.post("/api/transfers", json=_transfer_payload(transfer_from=404))

    assert response.status_code == 404
    assert response.json()["code"] == "LOCATION_NOT_FOUND"


def test_get_missing_transfer_returns_404(client):
    response = client.get("/api/transfers/999")

    assert response.status_code == 404
    assert response.json()["code"] == "TRANSFER_NOT_FOUND"


def test_list_transfer_items(client, seed_catalog):
    created = _create(client)

    response = client.get(f"/api/transfers/{created['id']}/items")

    assert response.status_code == 200
    assert [line["item_id"] for line in response.json()] == ["UID001", "UID002"]
    assert client.get("/api/transfers/999/items").status_code == 404


def test_update_transfer_keeps_items_and_clears_explicit_nulls(client, seed_catalog):
    created = _create(client)

    response = client.put(
        f"/api/transfers/{created['id']}",
        json={"reference": None, "transfer_status": "In Transit"},
    )

    assert response.status_code == 204
    updated = client.get(f"/api/transfers/{created['id']}").json()
    assert updated["reference"] is None
    assert updated["transfer_status"] == "In Transit"
    assert updated["transfer_from"] == 1
    assert updated["transfer_to"] == 2
    assert len(updated["items"]) == 2
    assert updated["created_at"] == created["created_at"]


def test_update_transfer_rejects_null_status(client, seed_catalog):
    created = _create(client)

    response = client.put(f"/api/transfers/{created['id']}", json={"transfer_status": None})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_update_missing_transfer_returns_404(client):
    response = client.put("/api/transfers/999", json={"reference": "X"})

    assert response.status_code == 404


def test_delete_transfer_cascades_lines_and_is_idempotent(client, seed_catalog, db_session):
    created = _create(client)

    first = client.delete(f"/api/transfers/{created['id']}")
    second = client.delete(f"/api/transfers/{created['id']}")

    assert first.status_code == 204
    assert second.status_code == 204
    assert client.get(f"/api/transfers/{created['id']}").status_code == 404
    assert db_session.query(TransferItem).count() == 0


def test_commit_transfer(client, seed_catalog):
    created = _create(client)

    response = client.post(f"/api/transfers/{created['id']}/commit")

    assert response.status_code == 204
    assert client.get(f"/api/transfers/{created['id']}").json()["transfer_status"] == "Completed"

    again = client.post(f"/api/transfers/{created['id']}/commit")
    assert again.status_code == 409
    assert again.json()["code"] == "TRANSFER_INVALID_STATE"


def test_list_transfers_filters_and_sorting(client, seed_catalog):
    first = _create(client, reference="TRF-ALPHA")
    second = _create(client, reference="TRF-BETA", transfer_from=2, transfer_to=1)
    third = _create(client, reference="OTHER")
    client.post(f"/api/transfers/{third['id']}/commit")

    by_reference = client.get("/api/transfers", params={"reference": "trf"}).json()
    by_origin = client.get("/api/transfers", params={"transfer_from": 2}).json()
    completed = client.get("/api/transfers", params={"transfer_status": "complete"}).json()
    descending = client.get("/api/transfers", params={"sort_by": "id", "sort_dir": "desc"}).json()

    assert [row["id"] for row in by_reference] == [first["id"], second["id"]]
    assert [row["id"] for row in by_origin] == [second["id"]]
    assert [row["id"] for row in completed] == [third["id"]]
    assert [row["id"] for row in descending] == [third["id"], second["id"], first["id"]]


def test_list_transfers_rejects_unknown_sort_field(client):
    response = client.get("/api/transfers", params={"sort_by": "password"})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_transfer_without_items_is_rejected(client, seed_catalog, db_session):
    response = client.post("/api/transfers", json=_transfer_payload(items=[]))

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert db_session.query(Transfer).count() == 0


def test_update_status_alone_keeps_other_header_fields(client, seed_catalog):
    created = _create(client)

    response = client.put(f"/api/transfers/{created['id']}", json={"transfer_status": "Cancelled"})

    assert response.status_code == 204
    updated = client.get(f"/api/transfers/{created['id']}").json()
    assert updated["transfer_status"] == "Cancelled"
    assert updated["reference"] == "TRF001"
    assert updated["transfer_from"] == 1
    assert updated["transfer_to"] == 2


def test_delete_unknown_transfer_leaves_existing_ones(client, seed_catalog):
    kept = _create(client)

    response = client.delete("/api/transfers/9999")

    assert response.status_code == 204
    assert [row["id"] for row in client.get("/api/transfers").json()] == [kept["id"]]
    assert len(client.get(f"/api/transfers/{kept['id']}/items").json()) == 2


def test_oversized_location_id_is_rejected(client, seed_catalog):
    response = client.post("/api/transfers", json=_transfer_payload(transfer_from=2**70))
    listing = client.get("/api/transfers", params={"transfer_to": 2**70})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert listing.status_code == 422
