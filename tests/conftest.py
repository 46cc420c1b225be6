"""Pytest configuration and fixtures for records-search.

Uses app.main:app for HTTP tests with the entity searchers overridden by
in-memory record stores, and app.infrastructure.persistence.database for
DB-dependent fixtures. All imports use app.*.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import get_entity_searchers
from app.application.dtos.search import (
    CompanyRecord,
    ContactRecord,
    DateRange,
    DocumentRecord,
    ProjectRecord,
)
from app.application.dtos.user import Principal
from app.application.services.authorization_service import AuthorizationService
from app.application.use_cases.search import (
    CompanySearcher,
    ContactSearcher,
    DocumentSearcher,
    ProjectSearcher,
    SearchService,
)
from app.core.config import Settings
from app.core.limiter import limiter
from app.domain.enums import EntityKind
from app.infrastructure.persistence import database
from app.infrastructure.security.jwt import create_access_token
from app.main import app


def _at(month: int, day: int) -> datetime:
    return datetime(2024, month, day, 9, 30, tzinfo=UTC)


class InMemoryRecordStore:
    """Record store over a fixed list. Returns every row as a candidate."""

    def __init__(self, records: list) -> None:
        self.records = records
        self.calls: list[tuple[str, object, DateRange]] = []

    async def find_matching(self, query: str, filters: object, date_range: DateRange) -> list:
        self.calls.append((query, filters, date_range))
        return list(self.records)


@pytest.fixture
def project_records() -> list[ProjectRecord]:
    return [
        ProjectRecord(
            id="p1",
            title="Downtown Corporate Tower",
            status="active",
            stage="construction",
            created_at=_at(3, 1),
            description="Twenty-story office building",
            address="100 Main St",
            city="Springfield",
            budget=Decimal("2500000.00"),
            updated_at=_at(5, 1),
            created_by_name="Alice Admin",
        ),
        ProjectRecord(
            id="p2",
            title="Riverside Homes",
            status="planning",
            stage="design",
            created_at=_at(6, 15),
            description="Residential development",
            city="Shelbyville",
        ),
    ]


@pytest.fixture
def contact_records() -> list[ContactRecord]:
    return [
        ContactRecord(
            id="c1",
            name="Jane Smith",
            email="jane@supplyco.example",
            role="project_manager",
            created_at=_at(2, 1),
            title="Project Manager",
            company_id="co1",
            company_name="Tower Supply Co",
            company_type="supplier_vendor",
        ),
        ContactRecord(
            id="c2",
            name="Bob Jones",
            email="bob@acme.example",
            role="executive",
            created_at=_at(2, 10),
            title="CEO",
            department="Leadership",
            company_id="co2",
            company_name="Acme Builders",
            company_type="contractor",
        ),
    ]


@pytest.fixture
def company_records() -> list[CompanyRecord]:
    return [
        CompanyRecord(
            id="co1",
            name="Tower Supply Co",
            type="supplier_vendor",
            created_at=_at(1, 20),
            website="https://supplyco.example",
            city="Springfield",
            country="US",
        ),
        CompanyRecord(
            id="co2",
            name="Acme Builders",
            type="contractor",
            created_at=_at(4, 5),
            description="General contractor",
            email="info@acme.example",
            city="Shelbyville",
        ),
    ]


@pytest.fixture
def document_records() -> list[DocumentRecord]:
    return [
        DocumentRecord(
            id="d1",
            name="Site Plan",
            type="drawings_plans",
            current_version="2",
            created_at=_at(3, 10),
            tags='["plans", "tower"]',
            project_id="p1",
            project_title="Downtown Corporate Tower",
            created_by_name="Alice Admin",
            latest_file_name="site-plan-v2.pdf",
            latest_file_size="1024",
            latest_version_notes="Revised tower footprint",
        ),
        DocumentRecord(
            id="d2",
            name="Acme Contract",
            type="contracts",
            current_version="1",
            created_at=_at(4, 20),
            description="Signed agreement",
            tags="not json",
            latest_file_name="contract.pdf",
            latest_file_size="2048",
        ),
    ]


@pytest.fixture
def record_stores(
    project_records, contact_records, company_records, document_records
) -> dict[EntityKind, InMemoryRecordStore]:
    """One in-memory store per kind, loaded with the sample records."""
    return {
        EntityKind.PROJECT: InMemoryRecordStore(project_records),
        EntityKind.CONTACT: InMemoryRecordStore(contact_records),
        EntityKind.COMPANY: InMemoryRecordStore(company_records),
        EntityKind.DOCUMENT: InMemoryRecordStore(document_records),
    }


@pytest.fixture
def searchers(record_stores) -> dict:
    """Entity searchers over the in-memory stores."""
    return {
        EntityKind.PROJECT: ProjectSearcher(record_stores[EntityKind.PROJECT]),
        EntityKind.CONTACT: ContactSearcher(record_stores[EntityKind.CONTACT]),
        EntityKind.COMPANY: CompanySearcher(record_stores[EntityKind.COMPANY]),
        EntityKind.DOCUMENT: DocumentSearcher(record_stores[EntityKind.DOCUMENT]),
    }


@pytest.fixture
def search_service(searchers) -> SearchService:
    return SearchService(searchers=searchers, authorization=AuthorizationService())


@pytest.fixture
def principal() -> Principal:
    return Principal(id="user-1", role="readonly", name="Reader")


def make_token(role: str = "readonly", sub: str = "user-1") -> str:
    """Signed bearer token with the given role."""
    return create_access_token({"sub": sub, "role": role})


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header for a readonly user."""
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def token_for():
    """Factory: role -> Authorization header."""

    def _headers(role: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(role=role)}"}

    return _headers


@pytest.fixture
async def client(searchers) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), searchers backed by memory."""
    app.dependency_overrides[get_entity_searchers] = lambda: searchers
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL. Skips (pytest.skip) when Postgres is not
    configured. Use @pytest.mark.requires_db to mark tests that need this
    fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database.ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def no_database(monkeypatch):
    """Force the persistence layer into the 'DATABASE_URL not set' state."""
    monkeypatch.setattr(
        database, "get_settings", lambda: Settings(secret_key="x", database_url="")
    )
    monkeypatch.setattr(database, "engine", None)
    monkeypatch.setattr(database, "AsyncSessionLocal", None)
