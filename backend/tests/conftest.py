"""Shared test fixtures for all test modules."""

import contextlib

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import dlsolutions.models  # noqa: F401
from dlsolutions.core import database as db_module
from dlsolutions.core.database import Base, get_db
from dlsolutions.core.errors import AuthError, ProcessorError
from dlsolutions.main import app
from dlsolutions.routers.contact import contact_rate_limiter
from dlsolutions.services.card_processor import CardProcessor, ProcessorCard, get_card_processor
from dlsolutions.services.identity import Identity, IdentityProvider, get_identity_provider

# In-memory SQLite engine with StaticPool so all connections share one
# database and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)


class FakeCardProcessor(CardProcessor):
    """In-memory card processor recording every call."""

    def __init__(self) -> None:
        self.customers: dict[str, str] = {}
        self.sources: dict[str, list[str]] = {}
        self.detached: list[tuple[str, str]] = []
        self.fail_create_customer = False
        self.fail_attach = False
        self.fail_detach = False
        self._counter = 0

    def _next(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}_{self._counter:04d}"

    def create_customer(self, user_id: str, email: str | None = None) -> str:
        if self.fail_create_customer:
            raise ProcessorError("customer creation declined")
        customer_id = self._next("cus")
        self.customers[customer_id] = user_id
        self.sources[customer_id] = []
        return customer_id

    def attach_source(self, customer_id: str, token: str) -> ProcessorCard:
        if self.fail_attach:
            raise ProcessorError("card declined")
        card = ProcessorCard(
            id=self._next("card"),
            brand="Visa",
            last4=token[-4:].rjust(4, "0"),
            exp_month=8,
            exp_year=2031,
            name=None if token.startswith("anon") else "Jane Doe",
        )
        self.sources.setdefault(customer_id, []).append(card.id)
        return card

    def detach_source(self, customer_id: str, source_id: str) -> None:
        if self.fail_detach:
            raise ProcessorError("detach failed")
        self.detached.append((customer_id, source_id))
        self.sources.get(customer_id, []).remove(source_id)


class FakeIdentityProvider(IdentityProvider):
    """Accepts tokens of the form ``user:<id>`` or ``admin:<id>``."""

    def resolve(self, token: str) -> Identity:
        kind, _, user_id = token.partition(":")
        if kind not in ("user", "admin") or not user_id:
            raise AuthError("Invalid token")
        return Identity(
            user_id=user_id,
            email=f"{user_id}@example.com",
            role="admin" if kind == "admin" else None,
        )


def auth_headers(user_id: str = "u1", admin: bool = False) -> dict[str, str]:
    kind = "admin" if admin else "user"
    return {"Authorization": f"Bearer {kind}:{user_id}"}


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and truncate all data after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)
    contact_rate_limiter.reset()

    yield

    with _test_engine.connect() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def db_session():
    """Create a database session for direct repository testing."""
    gen = get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


@pytest.fixture
def processor():
    return FakeCardProcessor()


@pytest.fixture
def client(processor):
    """Test client with the card processor and identity provider faked."""
    app.dependency_overrides[get_card_processor] = lambda: processor
    app.dependency_overrides[get_identity_provider] = FakeIdentityProvider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
