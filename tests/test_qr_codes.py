import base64
from datetime import datetime, timedelta, timezone

from restaurant_api.api.qrcodes.services.service_qr_code import render_qr_data_url, table_url

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _bulk(client, headers, **overrides):
    payload = {"store_id": "store-1", "table_count": 3, "start_number": 5}
    payload.update(overrides)
    resp = client.post("/api/v1/qr-codes/bulk", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_table_url_carries_store_and_table():
    assert table_url("https://menu.test/m", "s 1", "7") == "https://menu.test/m?store_id=s+1&table_number=7"


def test_render_qr_data_url_is_png():
    data_url = render_qr_data_url("https://menu.test/m?table_number=1")
    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(PNG_SIGNATURE)


def test_bulk_create_numbers_tables_from_start(client, staff_headers):
    codes = _bulk(client, staff_headers)

    assert [c["table_number"] for c in codes] == ["5", "6", "7"]
    assert len({c["code"] for c in codes}) == 3
    for c in codes:
        assert c["store_id"] == "store-1"
        assert c["type"] == "menu"
        assert c["menu_url"] == "http://localhost:3000/menu"
        assert c["image"].startswith("data:image/png;base64,")


def test_bulk_create_limits_table_count(client, staff_headers):
    resp = client.post(
        "/api/v1/qr-codes/bulk",
        json={"store_id": "store-1", "table_count": 0},
        headers=staff_headers,
    )
    assert resp.status_code == 400


def test_lookup_by_code_is_public(client, staff_headers):
    [qr] = _bulk(client, staff_headers, table_count=1)

    resp = client.get(f"/api/v1/qr-codes/code/{qr['code']}")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == qr["id"]

    assert client.get("/api/v1/qr-codes/code/unknown").status_code == 404


def test_expired_code_is_gone(client, staff_headers):
    past = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()
    resp = client.post(
        "/api/v1/qr-codes",
        json={"store_id": "store-1", "table_number": "9", "expires_at": past},
        headers=staff_headers,
    )
    assert resp.status_code == 201, resp.text

    resp = client.get(f"/api/v1/qr-codes/code/{resp.json()['data']['code']}")
    assert resp.status_code == 410
    assert resp.json()["message"] == "QR code has expired"


def test_management_requires_staff(client, customer_headers):
    assert client.get("/api/v1/qr-codes").status_code == 401
    assert client.get("/api/v1/qr-codes", headers=customer_headers).status_code == 403


def test_list_is_paginated_and_scoped_by_store(client, staff_headers):
    _bulk(client, staff_headers, table_count=4, start_number=1)
    _bulk(client, staff_headers, store_id="store-2", table_count=1, start_number=1)

    resp = client.get("/api/v1/qr-codes", params={"per_page": 2}, headers=staff_headers)
    body = resp.json()
    assert len(body["data"]) == 2
    assert body["metadata"]["total_count"] == 5
    assert body["metadata"]["total_pages"] == 3

    resp = client.get("/api/v1/qr-codes/store/store-2", headers=staff_headers)
    assert [c["store_id"] for c in resp.json()["data"]] == ["store-2"]


def test_update_rerenders_image_when_target_changes(client, staff_headers):
    [qr] = _bulk(client, staff_headers, table_count=1)

    resp = client.put(f"/api/v1/qr-codes/{qr['id']}", json={"table_number": "12"}, headers=staff_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["table_number"] == "12"
    assert data["code"] == qr["code"]
    assert data["image"] == render_qr_data_url(table_url(qr["menu_url"], "store-1", "12"))


def test_delete_qr_code(client, staff_headers):
    [qr] = _bulk(client, staff_headers, table_count=1)

    assert client.delete(f"/api/v1/qr-codes/{qr['id']}", headers=staff_headers).status_code == 200
    assert client.get(f"/api/v1/qr-codes/{qr['id']}", headers=staff_headers).status_code == 404
