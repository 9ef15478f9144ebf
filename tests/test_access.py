from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from jose import jwt

from restaurant_api.api.access.models import PermissionModel, RoleModel, UserModel
from restaurant_api.api.logs.models.model_log import LogModel
from restaurant_api.config.settings import ALGORITHM
from restaurant_api.core.admin_dependencies import require_permission
from restaurant_api.core.permissions_catalog import (
    FULL_ACCESS,
    STANDARD_MANAGEMENT_PERMISSIONS,
    PermissionName,
    has_permission,
    permission_bundle,
)
from restaurant_api.core.security import create_access_token, decode_access_token


# ---------------- permission grammar ----------------

@pytest.mark.parametrize("name", ["read:user", "create:order_item", "manage:anything", "full:access", "access:system"])
def test_permission_name_accepts_valid_keys(name):
    assert str(PermissionName(name)) == name


@pytest.mark.parametrize(
    "name, message",
    [
        ("", "permission name cannot be empty"),
        ("readuser", "permission must follow format"),
        ("Read:User", "permission must follow format"),
        ("fly:plane", "invalid action 'fly'"),
    ],
)
def test_permission_name_rejects_invalid_keys(name, message):
    with pytest.raises(ValueError, match=message):
        PermissionName(name)


def test_permission_bundle_normalizes_resource():
    keys = [p.key for p in permission_bundle("Order Item")]
    assert keys == [
        "read:order_item",
        "create:order_item",
        "update:order_item",
        "delete:order_item",
        "manage:order_item",
    ]


def test_full_access_grants_everything():
    assert has_permission([FULL_ACCESS], "delete:user")
    assert has_permission(["read:menu"], "read:menu")
    assert not has_permission(["read:menu"], "update:menu")
    assert not has_permission([], "read:menu")


def test_require_permission_checks_role_grants(create_user):
    check = require_permission("update:menu")

    assert check(current_user=create_user("owner@test.io", "Owner")).email == "owner@test.io"
    assert check(current_user=create_user("root@test.io", "System")).email == "root@test.io"

    with pytest.raises(HTTPException) as exc:
        check(current_user=create_user("cook@test.io", "Kitchen"))
    assert exc.value.status_code == 403
    assert exc.value.detail == "Insufficient permissions"


def test_system_roles_are_seeded(db):
    names = {r.name for r in db.query(RoleModel).all()}
    assert {"System", "Owner", "Admin", "Cashier", "Kitchen", "Waiter"} <= names

    system = db.query(RoleModel).filter(RoleModel.name == "System").one()
    assert system.permission_names == [FULL_ACCESS]


# ---------------- auth ----------------

def test_login_returns_token_and_stamps_last_login(client, create_user, db):
    user = create_user("ana@test.io", "Cashier", password="s3cret!")
    assert user.last_login_at is None

    resp = client.post("/api/v1/auth/login", json={"email": "ana@test.io", "password": "s3cret!"})

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["token_type"] == "Bearer"
    assert data["user"]["email"] == "ana@test.io"
    claims = decode_access_token(data["token"])
    assert claims["sub"] == user.id
    assert claims["role_name"] == "Cashier"
    assert "read:order" in claims["permissions"]

    db.expire_all()
    assert db.get(UserModel, user.id).last_login_at is not None
    assert db.query(LogModel).filter(LogModel.action == "user.login").count() == 1


def test_login_with_wrong_password(client, create_user, db):
    create_user("ana@test.io", password="s3cret!")

    resp = client.post("/api/v1/auth/login", json={"email": "ana@test.io", "password": "nope"})

    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid email or password"
    assert db.query(LogModel).filter(LogModel.action == "user.login_failed").count() == 1


@pytest.mark.parametrize(
    "headers, message",
    [
        ({}, "Missing authorization header"),
        ({"Authorization": "Token abc"}, "Invalid authorization format"),
        ({"Authorization": "Bearer not-a-jwt"}, "Invalid or expired token"),
    ],
)
def test_me_rejects_bad_credentials(client, headers, message):
    resp = client.get("/api/v1/auth/me", headers=headers)
    assert resp.status_code == 401
    assert resp.json()["message"] == message


def test_me_rejects_expired_or_foreign_tokens(client, create_user):
    user = create_user("late@test.io", "Waiter")
    expired = create_access_token({"sub": user.id}, expires_delta=timedelta(minutes=-5))
    foreign = jwt.encode(
        {"sub": user.id, "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        "some-other-key",
        algorithm=ALGORITHM,
    )

    for token in (expired, foreign):
        resp = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid or expired token"


def test_me_returns_current_user(client, create_user, auth_headers):
    user = create_user("me@test.io", "Waiter")
    resp = client.get("/api/v1/auth/me", headers=auth_headers(user))
    assert resp.json()["data"]["role"]["name"] == "Waiter"


# ---------------- users ----------------

def test_user_management_requires_admin(client, staff_headers):
    resp = client.get("/api/v1/users", headers=staff_headers)
    assert resp.status_code == 403


def test_create_user_rejects_duplicate_email(client, admin_headers):
    payload = {"name": "Rina", "email": "Rina@Test.io", "password": "secret123", "is_staff": True}

    resp = client.post("/api/v1/users", json=payload, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    assert resp.json()["data"]["email"] == "rina@test.io"
    assert "password_hash" not in resp.json()["data"]

    resp = client.post("/api/v1/users", json=payload | {"email": "rina@test.io"}, headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["message"] == "Email already exists"


@pytest.mark.parametrize("email", ["a b@@x", "no-at-sign.io", "@test.io"])
def test_create_user_rejects_malformed_email(client, admin_headers, db, email):
    payload = {"name": "Rina", "email": email, "password": "secret123"}

    resp = client.post("/api/v1/users", json=payload, headers=admin_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert any(v.startswith("email") for v in body["error"]["validation"])
    assert db.query(UserModel).filter(UserModel.email == email).count() == 0


def test_update_user_rejects_malformed_email(client, admin_headers, create_user):
    user = create_user("keep@test.io")

    resp = client.put(f"/api/v1/users/{user.id}", json={"email": "not an email"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_user_changes_password(client, admin_headers, create_user):
    user = create_user("old@test.io", password="secret123")

    resp = client.put(f"/api/v1/users/{user.id}", json={"password": "brandnew"}, headers=admin_headers)
    assert resp.status_code == 200

    resp = client.post("/api/v1/auth/login", json={"email": "old@test.io", "password": "brandnew"})
    assert resp.status_code == 200


# ---------------- permissions & roles ----------------

def test_create_permission_validates_name(client, admin_headers):
    resp = client.post("/api/v1/permissions", json={"name": "dance:floor"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    resp = client.post("/api/v1/permissions", json={"name": "export:report"}, headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["data"]["description"] == "Permission to export report"

    resp = client.post("/api/v1/permissions", json={"name": "export:report"}, headers=admin_headers)
    assert resp.status_code == 409


def test_generate_permissions_reuses_existing(client, admin_headers, db):
    resp = client.post("/api/v1/permissions/generate", json={"resource": "Menu"}, headers=admin_headers)

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["resource"] == "menu"
    assert len(data["permissions"]) == 5
    db.expire_all()
    assert db.query(PermissionModel).filter(PermissionModel.name == "read:menu").count() == 1

    resp = client.post("/api/v1/permissions/generate", json={"resource": "bad-name!"}, headers=admin_headers)
    assert resp.status_code == 400


def test_comprehensive_role_skips_invalid_resources(client, admin_headers):
    resp = client.post(
        "/api/v1/roles/comprehensive",
        json={"name": "Supervisor", "resources": ["shift", "not valid!", "Stock Item"]},
        headers=admin_headers,
    )

    assert resp.status_code == 201, resp.text
    names = {p["name"] for p in resp.json()["data"]["permissions"]}
    assert {"read:shift", "manage:shift", "delete:stock_item"} <= names
    assert set(STANDARD_MANAGEMENT_PERMISSIONS) <= names
    assert not any("valid" in n for n in names)


def test_role_update_replaces_permission_set(client, admin_headers, db):
    ids = {p.name: p.id for p in db.query(PermissionModel).all()}

    resp = client.post(
        "/api/v1/roles",
        json={"name": "Host", "permissions": [ids["read:menu"], ids["read:table"]]},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    role_id = resp.json()["data"]["id"]

    resp = client.put(
        f"/api/v1/roles/{role_id}",
        json={"permissions": [ids["update:table"]]},
        headers=admin_headers,
    )
    assert [p["name"] for p in resp.json()["data"]["permissions"]] == ["update:table"]

    resp = client.post(
        f"/api/v1/roles/{role_id}/permissions",
        json={"permission_ids": [ids["read:menu"], ids["update:table"]]},
        headers=admin_headers,
    )
    assert sorted(p["name"] for p in resp.json()["data"]["permissions"]) == ["read:menu", "update:table"]


def test_role_with_unknown_permission_is_rejected(client, admin_headers):
    resp = client.post(
        "/api/v1/roles",
        json={"name": "Ghost", "permissions": ["missing-id"]},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "One or more permissions were not found"


def test_role_name_must_be_unique(client, admin_headers):
    resp = client.post("/api/v1/roles", json={"name": "Cashier"}, headers=admin_headers)
    assert resp.status_code == 409
