from restaurant_api.api.themes.repositories.repo_themes import ThemeRepository


def _create(client, headers, **fields):
    resp = client.post("/api/v1/themes", data=fields, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_theme_writes_require_staff(client):
    resp = client.post("/api/v1/themes", data={"name": "Dark"})
    assert resp.status_code == 401


def test_create_theme_with_logo(client, staff_headers, storage):
    resp = client.post(
        "/api/v1/themes",
        data={"name": "Sunset", "primary_color": "#ff7f50"},
        files={"logo": ("logo.png", b"png-bytes", "image/png")},
        headers=staff_headers,
    )

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["logo_url"] == "https://cdn.test/themes/logo.png"
    assert data["primary_color"] == "#ff7f50"
    assert data["is_default"] is False
    assert storage.uploads == [("themes", "logo.png", 9)]


def test_theme_names_are_unique(client, staff_headers):
    _create(client, staff_headers, name="Ocean")

    resp = client.post("/api/v1/themes", data={"name": "ocean"}, headers=staff_headers)

    assert resp.status_code == 409
    assert resp.json()["message"] == "Theme name already exists"


def test_only_one_default_theme(client, staff_headers):
    first = _create(client, staff_headers, name="Light", is_default="true")
    second = _create(client, staff_headers, name="Dark", is_default="true")
    assert second["is_default"] is True

    themes = {t["name"]: t for t in client.get("/api/v1/themes").json()["data"]}
    assert themes["Light"]["is_default"] is False
    assert themes["Dark"]["is_default"] is True

    resp = client.put(f"/api/v1/themes/{first['id']}", data={"is_default": "true"}, headers=staff_headers)
    assert resp.json()["data"]["is_default"] is True
    resp = client.get(f"/api/v1/themes/{second['id']}")
    assert resp.json()["data"]["is_default"] is False


def test_update_theme_keeps_unsent_fields(client, staff_headers):
    theme = _create(client, staff_headers, name="Forest", primary_color="#228b22", accent_color="#ffd700")

    resp = client.put(f"/api/v1/themes/{theme['id']}", data={"accent_color": "#000000"}, headers=staff_headers)

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["name"] == "Forest"
    assert data["primary_color"] == "#228b22"
    assert data["accent_color"] == "#000000"


def test_delete_theme(client, staff_headers):
    theme = _create(client, staff_headers, name="Temp")

    assert client.delete(f"/api/v1/themes/{theme['id']}", headers=staff_headers).status_code == 200
    assert client.get(f"/api/v1/themes/{theme['id']}").status_code == 404


def test_name_conflict_uploads_no_logo(client, staff_headers, storage, monkeypatch):
    _create(client, staff_headers, name="Harbor")
    # skip the lookup so the unique index is what rejects the row
    monkeypatch.setattr(ThemeRepository, "get_by_name", lambda self, name: None)

    resp = client.post(
        "/api/v1/themes",
        data={"name": "Harbor"},
        files={"logo": ("harbor.png", b"png-bytes", "image/png")},
        headers=staff_headers,
    )

    assert resp.status_code == 409
    assert resp.json()["message"] == "Theme name already exists"
    assert storage.uploads == []
