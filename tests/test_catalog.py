from restaurant_api.api.catalog.models import ProductModel


def test_menu_reads_are_public(client, menu):
    resp = client.get("/api/v1/categories", params={"include_products": True})
    assert resp.status_code == 200
    [category] = resp.json()["data"]
    assert category["name"] == "Drinks"
    assert category["products"][0]["name"] == "Iced Tea"

    resp = client.get(f"/api/v1/products/{menu['product_id']}")
    data = resp.json()["data"]
    assert data["category_name"] == "Drinks"
    assert data["variations"][0]["options"][1]["label"] == "Large"


def test_catalog_writes_require_admin(client, staff_headers):
    resp = client.post("/api/v1/categories", json={"name": "Food"})
    assert resp.status_code == 401

    resp = client.post("/api/v1/categories", json={"name": "Food"}, headers=staff_headers)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Admin access required"


def test_category_name_is_unique_ignoring_case(client, menu, admin_headers):
    resp = client.post("/api/v1/categories", json={"name": "  drinks "}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "category name already exists"

    resp = client.post("/api/v1/categories", json={"name": "Desserts", "position": 2}, headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["data"]["name"] == "Desserts"


def test_category_cannot_be_deleted_while_it_has_products(client, menu, admin_headers):
    resp = client.delete(f"/api/v1/categories/{menu['category_id']}", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "cannot delete category: 1 associated products found"


def test_product_cannot_be_deleted_while_it_has_variations(client, menu, admin_headers):
    resp = client.delete(f"/api/v1/products/{menu['product_id']}", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "cannot delete product: 1 associated variations found"

    resp = client.delete(f"/api/v1/variations/{menu['variation_id']}", headers=admin_headers)
    assert resp.status_code == 200
    resp = client.delete(f"/api/v1/products/{menu['product_id']}", headers=admin_headers)
    assert resp.status_code == 200


def test_product_validation(client, menu, admin_headers):
    resp = client.post("/api/v1/products", json={"name": "Water", "base_price": 5}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "category_id is required"

    resp = client.post(
        "/api/v1/products",
        json={"category_id": menu["category_id"], "name": "Water", "base_price": 0},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "base price must be greater than zero"


def test_partial_update_keeps_unsent_fields(client, menu, admin_headers, db):
    resp = client.put(
        f"/api/v1/products/{menu['product_id']}",
        json={"description": "Brewed daily", "base_price": None},
        headers=admin_headers,
    )

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["description"] == "Brewed daily"
    assert data["name"] == "Iced Tea"
    assert data["base_price"] == 10.0
    assert data["category_id"] == menu["category_id"]

    db.expire_all()
    assert db.get(ProductModel, menu["product_id"]).is_available is True


def test_products_are_paginated(client, menu, admin_headers):
    for i in range(3):
        resp = client.post(
            "/api/v1/products",
            json={"category_id": menu["category_id"], "name": f"Juice {i}", "base_price": 15, "position": i + 1},
            headers=admin_headers,
        )
        assert resp.status_code == 201

    resp = client.get("/api/v1/products", params={"page": 2, "per_page": 3})
    body = resp.json()
    assert len(body["data"]) == 1
    assert body["metadata"] == {"page": 2, "per_page": 3, "total_pages": 2, "total_count": 4}


def test_create_and_update_product_with_variations(client, menu, admin_headers):
    resp = client.post(
        "/api/v1/products/with-variations",
        json={
            "category_id": menu["category_id"],
            "name": "Coffee",
            "base_price": 18,
            "variations": [
                {"variation_type": "size", "options": [{"label": "S"}, {"label": "L", "price_modifier": 4}]},
                {"variation_type": "milk", "options": [{"label": "Oat", "price_absolute": 25}]},
            ],
        },
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    product = resp.json()["data"]
    assert sorted(v["variation_type"] for v in product["variations"]) == ["milk", "size"]
    size = next(v for v in product["variations"] if v["variation_type"] == "size")

    resp = client.put(
        f"/api/v1/products/{product['id']}/with-variations",
        json={
            "name": "Hot Coffee",
            "variations": [{"id": size["id"], "is_required": True}],
            "remove_other_variations": True,
        },
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()["data"]
    assert updated["name"] == "Hot Coffee"
    assert updated["base_price"] == 18.0
    [variation] = updated["variations"]
    assert variation["id"] == size["id"]
    assert variation["is_required"] is True
    assert [o["label"] for o in variation["options"]] == ["S", "L"]


def test_product_with_invalid_variation_is_rejected(client, menu, admin_headers, db):
    resp = client.post(
        "/api/v1/products/with-variations",
        json={
            "category_id": menu["category_id"],
            "name": "Smoothie",
            "base_price": 20,
            "variations": [{"variation_type": "fruit", "options": []}],
        },
        headers=admin_headers,
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "at least one option is required"
    db.expire_all()
    assert db.query(ProductModel).filter(ProductModel.name == "Smoothie").count() == 0


def test_product_image_upload(client, menu, admin_headers, storage):
    resp = client.post(
        f"/api/v1/products/{menu['product_id']}/image",
        files={"file": ("tea.png", b"\x89PNG fake", "image/png")},
        headers=admin_headers,
    )

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["image_url"] == "https://cdn.test/products/tea.png"
    assert storage.uploads == [("products", "tea.png", 9)]


def test_variation_crud(client, menu, admin_headers):
    resp = client.post(
        "/api/v1/variations",
        json={"product_id": menu["product_id"], "variation_type": "sugar", "options": [{"label": "None"}]},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    variation_id = resp.json()["data"]["id"]

    resp = client.put(
        f"/api/v1/variations/{variation_id}",
        json={"options": [{"label": "Half"}, {"label": "Full", "is_default": True}]},
        headers=admin_headers,
    )
    assert resp.json()["data"]["variation_type"] == "sugar"
    assert len(resp.json()["data"]["options"]) == 2

    resp = client.get(f"/api/v1/products/{menu['product_id']}/variations")
    assert len(resp.json()["data"]) == 2
