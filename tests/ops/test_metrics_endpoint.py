from app.cargohub.core.metrics import metrics


def test_metrics_endpoint_reports_domain_events(client):
    metrics.reset()
    client.post("/api/docks", json={"warehouse_id": 1})

    response = client.get("/api/ops/metrics")

    assert response.status_code == 200
    if metrics.enabled:
        assert 'dock_events_total{action="create"} 1.0' in response.text
        assert "http_requests_total" in response.text
    else:
        assert response.text == "metrics_disabled\n"
