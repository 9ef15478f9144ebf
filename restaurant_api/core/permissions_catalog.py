from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

# System roles
ROLE_SYSTEM = "System"
ROLE_OWNER = "Owner"
ROLE_ADMIN = "Admin"
ROLE_CASHIER = "Cashier"
ROLE_KITCHEN = "Kitchen"
ROLE_WAITER = "Waiter"

SYSTEM_ROLES = [ROLE_SYSTEM, ROLE_OWNER, ROLE_ADMIN, ROLE_CASHIER, ROLE_KITCHEN, ROLE_WAITER]
ADMIN_ROLES = {ROLE_SYSTEM, ROLE_OWNER, ROLE_ADMIN}

# Actions
READ = "read"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"

STANDARD_ACTIONS = (
    READ, CREATE, UPDATE, DELETE,
    "manage", "approve", "reject", "export", "import",
    "assign", "view", "list", "access", "full",
)
SPECIAL_PREFIXES = ("manage:", "access:", "full:")

# Special permissions
MANAGE_USERS = "manage:users"
MANAGE_ROLES = "manage:roles"
MANAGE_PERMISSIONS = "manage:permissions"
ACCESS_SYSTEM = "access:system"
FULL_ACCESS = "full:access"

STANDARD_MANAGEMENT_PERMISSIONS = [
    "manage:users",
    "manage:roles",
    "manage:menu",
    "manage:orders",
    "manage:tables",
    "manage:inventory",
    "manage:reports",
    "manage:settings",
]

_PERMISSION_RE = re.compile(r"^([a-z]+):([a-z_]+)$")
_RESOURCE_RE = re.compile(r"^[a-z0-9_]+$")


@dataclass(frozen=True)
class PermissionName:
    """
    A permission key in the `action:resource` grammar.

    Construction fails with ValueError for anything that is not either
    a special permission (`manage:`, `access:`, `full:` prefixes) or a
    standard action followed by a lowercase resource.
    """
    value: str

    def __post_init__(self):
        name = self.value
        if not name:
            raise ValueError("permission name cannot be empty")
        if name.startswith(SPECIAL_PREFIXES):
            return
        match = _PERMISSION_RE.match(name)
        if not match:
            raise ValueError("permission must follow format 'action:resource' (e.g., 'read:user')")
        if match.group(1) not in STANDARD_ACTIONS:
            raise ValueError(
                f"invalid action '{match.group(1)}', must be one of: {', '.join(STANDARD_ACTIONS)}"
            )

    @property
    def action(self) -> str:
        return self.value.split(":", 1)[0]

    @property
    def resource(self) -> str:
        return self.value.split(":", 1)[1] if ":" in self.value else ""

    @property
    def is_special(self) -> bool:
        return self.value.startswith(SPECIAL_PREFIXES)

    def describe(self) -> str:
        if self.is_special:
            return f"Special permission to {self.action} {self.resource}"
        return f"Permission to {self.action} {self.resource.replace('_', ' ')}"

    def __str__(self) -> str:
        return self.value


def format_permission(action: str, resource: str) -> str:
    return f"{action}:{resource}"


def normalize_resource(resource_name: str) -> str:
    """Lowercases a resource name and replaces spaces; raises ValueError when invalid."""
    resource_name = (resource_name or "").strip()
    if not resource_name:
        raise ValueError("resource name cannot be empty")
    formatted = resource_name.lower().replace(" ", "_")
    if not _RESOURCE_RE.match(formatted):
        raise ValueError("resource name must contain only letters, numbers, and underscores")
    return formatted


@dataclass(frozen=True)
class PermissionDef:
    key: str
    description: str | None = None


def crud_permissions(resource: str) -> list[PermissionDef]:
    label = resource.replace("_", " ")
    return [
        PermissionDef(key=format_permission(action, resource), description=f"Permission to {action} {label}")
        for action in (READ, CREATE, UPDATE, DELETE)
    ]


def management_permission(resource: str) -> PermissionDef:
    return PermissionDef(
        key=f"manage:{resource}",
        description=f"Permission to manage all aspects of {resource.replace('_', ' ')}",
    )


def permission_bundle(resource_name: str) -> list[PermissionDef]:
    """CRUD + manage permissions for a resource."""
    resource = normalize_resource(resource_name)
    return crud_permissions(resource) + [management_permission(resource)]


def _crud(resource: str, *actions: str) -> list[str]:
    return [format_permission(a, resource) for a in actions]


def get_default_permissions_for_role(role_name: str) -> List[str]:
    """Default permission keys for the predefined roles; custom roles get none."""
    if role_name == ROLE_SYSTEM:
        return [FULL_ACCESS]

    if role_name == ROLE_OWNER:
        return (
            [MANAGE_USERS, MANAGE_ROLES, MANAGE_PERMISSIONS, ACCESS_SYSTEM]
            + _crud("report", READ, CREATE)
            + _crud("user", READ, CREATE, UPDATE, DELETE)
            + _crud("role", READ, CREATE, UPDATE, DELETE)
            + _crud("menu", READ, CREATE, UPDATE, DELETE)
            + _crud("order", READ, CREATE, UPDATE, DELETE)
            + _crud("table", READ, CREATE, UPDATE, DELETE)
            + _crud("inventory", READ, CREATE, UPDATE, DELETE)
            + _crud("setting", READ, UPDATE)
        )

    if role_name == ROLE_ADMIN:
        return (
            [MANAGE_USERS]
            + _crud("report", READ, CREATE)
            + _crud("user", READ, CREATE, UPDATE)
            + _crud("menu", READ, CREATE, UPDATE, DELETE)
            + _crud("order", READ, CREATE, UPDATE, DELETE)
            + _crud("table", READ, CREATE, UPDATE, DELETE)
            + _crud("inventory", READ, CREATE, UPDATE, DELETE)
            + _crud("setting", READ)
        )

    if role_name == ROLE_CASHIER:
        return _crud("menu", READ) + _crud("order", READ, CREATE, UPDATE) + _crud("table", READ, UPDATE)

    if role_name == ROLE_KITCHEN:
        return _crud("menu", READ) + _crud("order", READ, UPDATE) + _crud("inventory", READ, UPDATE)

    if role_name == ROLE_WAITER:
        return _crud("menu", READ) + _crud("order", READ, UPDATE) + _crud("table", READ, UPDATE)

    return []


def get_default_permissions() -> List[PermissionDef]:
    """Every permission referenced by the predefined roles (seed catalog)."""
    seen: dict[str, PermissionDef] = {}
    for role in SYSTEM_ROLES:
        for key in get_default_permissions_for_role(role):
            if key not in seen:
                seen[key] = PermissionDef(key=key, description=PermissionName(key).describe())
    return list(seen.values())


def has_permission(user_permissions: Iterable[str], required: str) -> bool:
    perms = set(user_permissions or [])
    return FULL_ACCESS in perms or required in perms

