from sqlalchemy.orm import Session

from restaurant_api.config.settings import SEED_ADMIN_EMAIL, SEED_ADMIN_NAME, SEED_ADMIN_PASSWORD
from restaurant_api.core.permissions_catalog import (
    ROLE_SYSTEM,
    SYSTEM_ROLES,
    get_default_permissions,
    get_default_permissions_for_role,
)
from restaurant_api.core.security import hash_password
from restaurant_api.database.db_connection import Base, SessionLocal, engine
from restaurant_api.utils.logger import logger


def import_models():
    """Registers every model on `Base` so string relationships resolve."""
    # ─── Access ─────────────────────────────────────────────
    from restaurant_api.api.access.models import PermissionModel, RoleModel, UserModel  # noqa: F401
    # ─── Catalog ────────────────────────────────────────────
    from restaurant_api.api.catalog.models import CategoryModel, ProductModel, VariationModel  # noqa: F401
    # ─── QR codes (before orders: orders.qr_id) ─────────────
    from restaurant_api.api.qrcodes.models import QRCodeModel  # noqa: F401
    # ─── Orders ─────────────────────────────────────────────
    from restaurant_api.api.orders.models import (  # noqa: F401
        InvoiceModel,
        OrderDetailModel,
        OrderModel,
        PaymentModel,
    )
    # ─── Themes / Logs ──────────────────────────────────────
    from restaurant_api.api.themes.models import ThemeModel  # noqa: F401
    from restaurant_api.api.logs.models.model_log import LogModel  # noqa: F401
    logger.info("[DB] Models imported.")


def create_tables(bind=engine):
    import_models()
    Base.metadata.create_all(bind=bind, checkfirst=True)
    logger.info("[DB] Tables created/verified.")


def seed_permissions(session: Session) -> int:
    """Permission catalog (idempotent)."""
    from restaurant_api.api.access.repositories.repo_permissions import PermissionRepository

    repo = PermissionRepository(session)
    defaults = get_default_permissions()
    for p in defaults:
        repo.get_or_create(p.key, p.description)
    return len(defaults)


def seed_roles(session: Session) -> None:
    """Predefined roles with their default permissions; existing roles keep their grants."""
    from restaurant_api.api.access.models import RoleModel
    from restaurant_api.api.access.repositories.repo_permissions import PermissionRepository
    from restaurant_api.api.access.repositories.repo_roles import RoleRepository

    repo_roles = RoleRepository(session)
    repo_permissions = PermissionRepository(session)
    for role_name in SYSTEM_ROLES:
        if repo_roles.get_by_name(role_name):
            continue
        permissions = repo_permissions.list_by_names(get_default_permissions_for_role(role_name))
        repo_roles.create(
            RoleModel(
                name=role_name,
                description=f"Predefined {role_name} role",
                permissions=permissions,
            )
        )
        logger.info("[DB] Seed: role %s created with %s permissions.", role_name, len(permissions))


def seed_system_user(session: Session) -> None:
    """Bootstrap System user, only when SEED_ADMIN_EMAIL and SEED_ADMIN_PASSWORD are set."""
    from restaurant_api.api.access.models import UserModel
    from restaurant_api.api.access.repositories.repo_roles import RoleRepository
    from restaurant_api.api.access.repositories.repo_users import UserRepository

    if not SEED_ADMIN_EMAIL or not SEED_ADMIN_PASSWORD:
        logger.info("[DB] Seed: SEED_ADMIN_EMAIL/SEED_ADMIN_PASSWORD not set; skipping system user.")
        return

    repo_users = UserRepository(session)
    if repo_users.get_by_email(SEED_ADMIN_EMAIL):
        return

    role = RoleRepository(session).get_by_name(ROLE_SYSTEM)
    repo_users.create(
        UserModel(
            name=SEED_ADMIN_NAME,
            email=SEED_ADMIN_EMAIL.lower(),
            password_hash=hash_password(SEED_ADMIN_PASSWORD),
            is_staff=True,
            role_id=role.id if role else None,
        )
    )
    logger.info("[DB] Seed: system user %s created.", SEED_ADMIN_EMAIL)


def init_db(bind=engine, session_factory=SessionLocal):
    logger.info("[DB] Step 1/2: creating/verifying tables...")
    create_tables(bind)

    logger.info("[DB] Step 2/2: seeding permissions, roles and system user...")
    with session_factory() as session:
        try:
            total = seed_permissions(session)
            seed_roles(session)
            seed_system_user(session)
            session.commit()
        except Exception:
            session.rollback()
            logger.error("[DB] Seed failed", exc_info=True)
            raise

    logger.info("[DB] Database initialized (%s default permissions).", total)
