import pytest
from sqlalchemy.exc import IntegrityError

from restaurant_api.api.orders.models import OrderDetailModel, OrderModel, PaymentModel
from restaurant_api.api.orders.repositories.repo_orders import OrderRepository


def _order_payload(menu, quantity=2, **extra):
    payload = {
        "customer_name": "Dewi",
        "customer_phone": "0812000111",
        "table_number": 4,
        "details": [
            {
                "product_id": menu["product_id"],
                "variation_id": menu["variation_id"],
                "quantity": quantity,
                "note": "less ice",
            }
        ],
    }
    payload.update(extra)
    return payload


def _create_order(client, menu, **kwargs):
    resp = client.post("/api/v1/orders", json=_order_payload(menu, **kwargs))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_create_order_prices_lines_from_catalog(client, menu):
    order = _create_order(client, menu)

    assert order["status"] == "Pending"
    assert order["dish_status"] == "In Process"
    assert order["total_amount"] == 25.0

    [line] = order["details"]
    assert line["product_name"] == "Iced Tea"
    assert line["variation_name"] == "Large"
    assert line["unit_price"] == 12.5
    assert line["total_price"] == 25.0
    assert line["order_id"] == order["id"]


def test_create_order_response_envelope(client, menu):
    resp = client.post("/api/v1/orders", json=_order_payload(menu))
    body = resp.json()
    assert body["status"] == 201
    assert body["message"] == "Order created successfully"
    assert {"message", "status", "data", "timestamp"} <= set(body)


def test_create_order_with_unknown_product_is_rejected(client, menu, db):
    payload = _order_payload(menu)
    payload["details"][0]["product_id"] = "does-not-exist"

    resp = client.post("/api/v1/orders", json=payload)

    assert resp.status_code == 400
    assert "product not found" in resp.json()["message"]
    assert db.query(OrderModel).count() == 0


def test_create_order_requires_details(client, menu):
    resp = client.post("/api/v1/orders", json=_order_payload(menu) | {"details": []})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_order_and_details_roll_back_together(db, menu):
    order = OrderModel(
        customer_name="Budi",
        customer_phone="0812",
        table_number=1,
        total_amount=10,
    )
    details = [
        OrderDetailModel(product_id=menu["product_id"], product_name="Iced Tea", unit_price=10, quantity=1, total_price=10),
        # violates the products foreign key
        OrderDetailModel(product_id="missing-product", product_name="Ghost", unit_price=5, quantity=1, total_price=5),
    ]

    with pytest.raises(IntegrityError):
        OrderRepository(db).create_order(order, details)

    assert db.query(OrderModel).count() == 0
    assert db.query(OrderDetailModel).count() == 0


def test_create_order_commits_order_with_details(db, menu):
    order = OrderModel(customer_name="Sari", customer_phone="0813", table_number=2, total_amount=20)
    details = [
        OrderDetailModel(product_id=menu["product_id"], product_name="Iced Tea", unit_price=10, quantity=2, total_price=20),
    ]

    created = OrderRepository(db).create_order(order, details)

    db.expire_all()
    stored = OrderRepository(db).get(created.id)
    assert len(stored.details) == 1
    assert stored.details[0].order_id == created.id


def test_order_management_requires_staff(client, menu, customer_headers):
    assert client.get("/api/v1/orders").status_code == 401

    resp = client.get("/api/v1/orders", headers=customer_headers)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Staff access required"


def test_list_orders_is_paginated_and_filtered(client, menu, staff_headers):
    first = _create_order(client, menu)
    _create_order(client, menu)
    client.post(f"/api/v1/orders/{first['id']}/cancel", headers=staff_headers)

    resp = client.get("/api/v1/orders", params={"per_page": 1}, headers=staff_headers)
    body = resp.json()
    assert resp.status_code == 200
    assert len(body["data"]) == 1
    assert body["metadata"] == {"page": 1, "per_page": 1, "total_pages": 2, "total_count": 2}

    resp = client.get("/api/v1/orders", params={"status": "Cancelled"}, headers=staff_headers)
    assert [o["id"] for o in resp.json()["data"]] == [first["id"]]


def test_process_payment_rules(client, menu, staff_headers):
    order = _create_order(client, menu)
    url = f"/api/v1/orders/{order['id']}/payment"

    resp = client.post(url, json={"method": "Cash", "amount": 20}, headers=staff_headers)
    assert resp.status_code == 400
    assert "does not match order total" in resp.json()["message"]

    resp = client.post(url, json={"method": "QRIS", "amount": 25, "transaction_ref": "TX-1"}, headers=staff_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["status"] == "Success"

    stored = client.get(f"/api/v1/orders/{order['id']}", headers=staff_headers).json()["data"]
    assert stored["status"] == "Paid"
    assert stored["paid_at"] is not None
    assert len(stored["payments"]) == 1

    resp = client.post(url, json={"method": "Cash", "amount": 25}, headers=staff_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "order already paid"


def test_cancel_order_refunds_payments(client, menu, staff_headers, db):
    order = _create_order(client, menu)
    client.post(
        f"/api/v1/orders/{order['id']}/payment",
        json={"method": "Debit", "amount": 25},
        headers=staff_headers,
    )

    resp = client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["status"] == "Cancelled"
    assert data["dish_status"] == "Cancelled"
    assert data["cancelled_at"] is not None
    assert {p.status for p in db.query(PaymentModel).all()} == {"Refunded"}

    resp = client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "order is already cancelled"


def test_cancelled_order_cannot_be_paid(client, menu, staff_headers):
    order = _create_order(client, menu)
    client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)

    resp = client.post(
        f"/api/v1/orders/{order['id']}/payment",
        json={"method": "Cash", "amount": 25},
        headers=staff_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "cannot pay for cancelled order"


def test_completed_order_cannot_be_cancelled(client, menu, staff_headers):
    order = _create_order(client, menu)

    resp = client.post(f"/api/v1/orders/{order['id']}/complete", headers=staff_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["dish_status"] == "Completed"

    resp = client.post(f"/api/v1/orders/{order['id']}/complete", headers=staff_headers)
    assert resp.status_code == 400

    resp = client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "cannot cancel order that is already completed"


def test_status_stays_a_plain_tag_on_direct_update(client, menu, staff_headers):
    order = _create_order(client, menu)
    client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)

    resp = client.put(f"/api/v1/orders/{order['id']}", json={"status": "Paid"}, headers=staff_headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "Paid"


def test_update_order_replaces_items_and_settles_payment(client, menu, staff_headers):
    order = _create_order(client, menu)
    old_line = order["details"][0]["id"]

    resp = client.put(
        f"/api/v1/orders/{order['id']}",
        json={
            "customer_name": "Dewi S.",
            "customer_phone": "",
            "deleted_item_ids": [old_line],
            "items": [{"product_id": menu["product_id"], "quantity": 3}],
            "payment": {"method": "Cash", "amount": 30},
        },
        headers=staff_headers,
    )

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["customer_name"] == "Dewi S."
    assert data["customer_phone"] == "0812000111"
    assert [d["unit_price"] for d in data["details"]] == [10.0]
    assert data["total_amount"] == 30.0
    assert data["status"] == "Paid"
    assert data["dish_status"] == "In Process"
    assert data["payments"][0]["status"] == "Success"


def test_update_order_partial_payment_stays_pending(client, menu, staff_headers):
    order = _create_order(client, menu)

    resp = client.put(
        f"/api/v1/orders/{order['id']}",
        json={"payment": {"method": "Cash", "amount": 10}},
        headers=staff_headers,
    )

    assert resp.json()["data"]["status"] == "Pending"


def test_update_order_explicit_status_is_kept_with_payments(client, menu, staff_headers):
    order = _create_order(client, menu)
    url = f"/api/v1/orders/{order['id']}"
    client.put(url, json={"payment": {"method": "Cash", "amount": 10}}, headers=staff_headers)

    resp = client.put(url, json={"status": "Cancelled"}, headers=staff_headers)

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["status"] == "Cancelled"


def test_update_cancelled_order_keeps_refunds(client, menu, staff_headers):
    order = _create_order(client, menu)
    client.post(f"/api/v1/orders/{order['id']}/payment", json={"method": "Cash", "amount": 25}, headers=staff_headers)
    client.post(f"/api/v1/orders/{order['id']}/cancel", headers=staff_headers)

    resp = client.put(f"/api/v1/orders/{order['id']}", json={"notes": "window seat"}, headers=staff_headers)

    data = resp.json()["data"]
    assert data["notes"] == "window seat"
    assert data["status"] == "Cancelled"
    assert data["dish_status"] == "Cancelled"
    assert [p["status"] for p in data["payments"]] == ["Refunded"]


def test_order_details_can_be_appended_and_listed(client, menu, staff_headers):
    order = _create_order(client, menu, quantity=1)

    resp = client.post(
        f"/api/v1/orders/{order['id']}/details",
        json={"details": [{"product_name": "Extra napkins", "unit_price": 1.5, "quantity": 2}]},
        headers=staff_headers,
    )
    assert resp.status_code == 201, resp.text

    details = client.get(f"/api/v1/orders/{order['id']}/details", headers=staff_headers).json()["data"]
    assert sorted(d["product_name"] for d in details) == ["Extra napkins", "Iced Tea"]

    stored = client.get(f"/api/v1/orders/{order['id']}", headers=staff_headers).json()["data"]
    assert stored["total_amount"] == 15.5


def test_invoice_is_unique_per_order(client, menu, staff_headers):
    order = _create_order(client, menu)

    resp = client.post(f"/api/v1/orders/{order['id']}/invoice", headers=staff_headers)
    assert resp.status_code == 201, resp.text
    invoice = resp.json()["data"]
    assert invoice["invoice_number"].startswith("INV-")
    assert len(invoice["invoice_number"]) == len("INV-YYYYMMDD-XXXXXXXX")
    assert invoice["total"] == 25.0
    assert invoice["customer_snapshot"]["name"] == "Dewi"
    assert invoice["items_snapshot"][0]["product_name"] == "Iced Tea"

    resp = client.post(f"/api/v1/orders/{order['id']}/invoice", headers=staff_headers)
    assert resp.status_code == 409

    resp = client.get(f"/api/v1/invoices/{invoice['id']}", headers=staff_headers)
    assert resp.json()["data"]["order_id"] == order["id"]


def test_payment_requires_existing_order(client, staff_headers):
    resp = client.post(
        "/api/v1/payments",
        json={"order_id": "nope", "method": "Cash", "amount": 5},
        headers=staff_headers,
    )
    assert resp.status_code == 400
