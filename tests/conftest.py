from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from studio import models  # noqa: F401
from studio.api import deps
from studio.core.security import create_access_token
from studio.db.session import get_db
from studio.main import app
from studio.schemas.client import ClientCreate
from studio.schemas.image import ImageCreate
from studio.schemas.shoot import ShootCreate
from studio.services import clients as client_service
from studio.services import images as image_service
from studio.services import shoots as shoot_service
from studio.site_config import DEFAULT_SITE_CONFIG, FileOverrideBackend, SiteConfigStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def overrides_path(tmp_path):
    return tmp_path / "data" / "site-config-overrides.json"


@pytest.fixture
def site_config(overrides_path):
    return SiteConfigStore(FileOverrideBackend(str(overrides_path)), DEFAULT_SITE_CONFIG).load()


@pytest.fixture
def api(engine, site_config):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_site_config_store] = lambda: site_config
    # No context manager: the lifespan (real database, real overrides file) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def staff_headers():
    token = create_access_token("staff-1", "staff", email="admin@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client_headers():
    token = create_access_token("client-1", "client", email="sarah@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_client(db):
    def _make(name="Sarah Johnson", email="sarah@example.com", **kwargs):
        return client_service.create_client(db, ClientCreate(name=name, email=email, **kwargs), user_id="staff-1")
    return _make


@pytest.fixture
def make_shoot(db, make_client):
    def _make(title="Sarah & Tom Wedding", client=None, **kwargs):
        client = client or make_client()
        fields = dict(
            client_id=client.id,
            title=title,
            shoot_type="wedding",
            shoot_date=date(2024, 2, 20),
            location="Franschhoek",
        )
        fields.update(kwargs)
        return shoot_service.create_shoot(db, ShootCreate(**fields))
    return _make


@pytest.fixture
def make_images(db):
    def _make(shoot, count=3):
        return [
            image_service.create_image(
                db,
                ImageCreate(
                    shoot_id=shoot.id,
                    filename=f"image-{shoot.id}-{n}.jpg",
                    storage_path=f"shoots/{shoot.id}/image-{n}.jpg",
                    file_size=1024 * n,
                ),
            )
            for n in range(1, count + 1)
        ]
    return _make
