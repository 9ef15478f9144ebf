import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_SILENT"] = "true"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from restaurant_api.main import app  # noqa: E402
from restaurant_api.api.access.models import RoleModel, UserModel  # noqa: E402
from restaurant_api.api.catalog.models import CategoryModel, ProductModel, VariationModel  # noqa: E402
from restaurant_api.core.security import create_access_token, hash_password  # noqa: E402
from restaurant_api.database.db_connection import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from restaurant_api.database.init_db import init_db  # noqa: E402
from restaurant_api.utils.minio_client import get_storage  # noqa: E402

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


class FakeStorage:
    """Stands in for MinIO; remembers what was uploaded."""

    def __init__(self):
        self.uploads = []

    def upload_file(self, file, folder: str) -> str:
        data = file.file.read()
        self.uploads.append((folder, file.filename, len(data)))
        return f"https://cdn.test/{folder}/{file.filename}"


fake_storage = FakeStorage()

app.dependency_overrides[get_db] = override_get_db
app.dependency_overrides[get_storage] = lambda: fake_storage


@pytest.fixture(autouse=True)
def database():
    init_db(bind=engine, session_factory=TestingSessionLocal)
    fake_storage.uploads.clear()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_user(db, email: str, role_name: str | None = None, is_staff: bool = True, password: str = "secret123"):
    role = db.query(RoleModel).filter(RoleModel.name == role_name).first() if role_name else None
    user = UserModel(
        name=email.split("@")[0],
        email=email,
        password_hash=hash_password(password),
        is_staff=is_staff,
        role_id=role.id if role else None,
    )
    db.add(user)
    db.commit()
    return user


def bearer(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}


@pytest.fixture
def admin_headers(db):
    return bearer(make_user(db, "admin@test.io", "Admin"))


@pytest.fixture
def staff_headers(db):
    return bearer(make_user(db, "cashier@test.io", "Cashier"))


@pytest.fixture
def customer_headers(db):
    return bearer(make_user(db, "guest@test.io", None, is_staff=False))


@pytest.fixture
def menu(db):
    """One category, one 10.00 product with a size variation (Large +2.50 as default)."""
    category = CategoryModel(name="Drinks", position=1)
    db.add(category)
    db.flush()
    product = ProductModel(category_id=category.id, name="Iced Tea", base_price=10)
    db.add(product)
    db.flush()
    variation = VariationModel(
        product_id=product.id,
        variation_type="size",
        options=[
            {"label": "Regular", "is_default": False},
            {"label": "Large", "price_modifier": 2.5, "is_default": True},
        ],
    )
    db.add(variation)
    db.commit()
    return {"category_id": category.id, "product_id": product.id, "variation_id": variation.id}


@pytest.fixture
def storage():
    return fake_storage


@pytest.fixture
def create_user(db):
    def _create(email: str, role_name: str | None = None, is_staff: bool = True, password: str = "secret123"):
        return make_user(db, email, role_name, is_staff=is_staff, password=password)
    return _create


@pytest.fixture
def auth_headers():
    return bearer
