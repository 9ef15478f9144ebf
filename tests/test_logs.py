from restaurant_api.utils.logger import AppLogger


def _entry(**overrides):
    entry = {
        "level": "info",
        "source": "pos-terminal",
        "action": "drawer.open",
        "entity": "register",
        "environment": "test",
        "application": "pos",
        "type": "activity",
        "metadata": {"register": 2},
    }
    entry.update(overrides)
    return entry


def test_create_log_records_request_context(client):
    resp = client.post("/api/v1/logs", json=_entry(), headers={"X-Request-ID": "req-42"})

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["request_id"] == "req-42"
    assert data["ip_address"] == "testclient"
    assert data["metadata"] == {"register": 2}
    assert data["timestamp"]


def test_create_log_requires_fields(client):
    entry = _entry()
    del entry["level"]
    entry["action"] = ""

    resp = client.post("/api/v1/logs", json=entry)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert any(m.startswith("level") for m in body["error"]["validation"])
    assert any(m.startswith("action") for m in body["error"]["validation"])


def test_list_logs_is_admin_only_and_filtered(client, admin_headers, staff_headers):
    client.post("/api/v1/logs", json=_entry())
    client.post("/api/v1/logs", json=_entry(level="error", entity="printer"))

    assert client.get("/api/v1/logs", headers=staff_headers).status_code == 403

    resp = client.get("/api/v1/logs", params={"level": "error"}, headers=admin_headers)
    body = resp.json()
    assert resp.status_code == 200
    assert [log["entity"] for log in body["data"]] == ["printer"]
    assert body["metadata"]["total_count"] == 1


def test_order_creation_writes_activity_log(client, menu, admin_headers):
    client.post(
        "/api/v1/orders",
        json={
            "customer_name": "Tono",
            "customer_phone": "0811",
            "table_number": 1,
            "details": [{"product_id": menu["product_id"], "quantity": 1}],
        },
    )

    resp = client.get("/api/v1/logs", params={"source": "orders"}, headers=admin_headers)
    [log] = resp.json()["data"]
    assert log["action"] == "create"
    assert log["entity"] == "order"
    assert log["metadata"]["items"] == 1


class _Collector:
    def __init__(self):
        self.entries = []

    def persist(self, entry):
        self.entries.append(entry)


def test_app_logger_hands_entries_to_persister():
    collector = _Collector()
    app_logger = AppLogger(persister=collector, environment="test", application="api", hostname="box", silent=True)

    app_logger.audit("auth", "user.login", "user", entity_id="u1")
    app_logger.warn("auth", "user.login_failed", "user", "bad password")

    first, second = collector.entries
    assert first["level"] == "audit"
    assert first["type"] == "audit"
    assert first["hostname"] == "box"
    assert second["level"] == "warn"
    assert second["type"] == "activity"
    assert second["description"] == "bad password"
