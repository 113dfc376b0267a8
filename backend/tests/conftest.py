# backend/tests/conftest.py
import os

# the module-level engine needs a URL before anything imports database.session
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from config.settings import Settings
from database.session import Base, build_engine
from gateway.dependencies import get_resource_gateway, get_session_service
from gateway.dispatcher import ResourceGateway
from main import create_app
from services.session_service import AdminSessionService
import models  # noqa: F401

ADMIN_EMAIL = "admin@thriftysouq.com"
ADMIN_PASSWORD = "correct-horse"
ENDPOINT = "/api/v1/gateway/site-management"


@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'gateway.db'}")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def settings():
    return Settings(
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        admin_session_ttl_minutes=30,
        admin_session_required=True,
    )


@pytest.fixture
def session_service(session_factory, settings):
    return AdminSessionService(session_factory, settings)


@pytest.fixture
def gateway(session_factory, session_service):
    return ResourceGateway(session_factory, session_service, require_admin=True)


@pytest.fixture
def app(gateway, session_service):
    application = create_app()
    application.dependency_overrides[get_resource_gateway] = lambda: gateway
    application.dependency_overrides[get_session_service] = lambda: session_service
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_token(session_service):
    return session_service.login(ADMIN_EMAIL, ADMIN_PASSWORD).token


@pytest.fixture
def call(client, admin_token):
    """POST an envelope to the gateway; authenticated unless `token=None`."""

    def _call(resource=None, action=None, token=admin_token, **fields):
        body = {k: v for k, v in {"resource": resource, "action": action, **fields}.items() if v is not None}
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        return client.post(ENDPOINT, json=body, headers=headers)

    return _call
