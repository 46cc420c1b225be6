"""Record stores for global search (PostgreSQL, ILIKE over text columns).

Each store opens its own session per call so the four entity searches can
run concurrently. Text match and structured filters are pushed down to
SQL; the searchers re-check every row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, and_, func, or_, select

from app.application.dtos.search import (
    CompanyFilters,
    CompanyRecord,
    ContactFilters,
    ContactRecord,
    DateRange,
    DocumentFilters,
    DocumentRecord,
    ProjectFilters,
    ProjectRecord,
)
from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.models import (
    Company,
    Contact,
    Project,
    ProjectDocument,
    ProjectDocumentVersion,
    User,
)
from app.shared.utils.datetime import ensure_utc, to_naive_utc

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


def like_pattern(query: str) -> str:
    """Return a contains-pattern with ILIKE wildcards % and _ escaped so query is literal."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _text_match(pattern: str, *columns: Any) -> Any:
    return or_(*(col.ilike(pattern, escape="\\") for col in columns))


def _date_conditions(column: Any, date_range: DateRange) -> list[Any]:
    conditions = []
    if date_range.date_from is not None:
        conditions.append(column >= to_naive_utc(date_range.date_from))
    if date_range.date_to is not None:
        conditions.append(column <= to_naive_utc(date_range.date_to))
    return conditions


class _RecordStore:
    """Shared session handling for the read-only record stores.

    Without an explicit session_factory the shared one is resolved on first
    query, so a missing DATABASE_URL surfaces as SqlNotConfiguredException
    from inside the search rather than when the store is built.
    """

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession] | None = None
    ) -> None:
        self.session_factory = session_factory

    async def _fetch(self, stmt: Select) -> list[Any]:
        if self.session_factory is None:
            self.session_factory = get_session_factory()
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.mappings().all())


class ProjectSearchRepository(_RecordStore):
    """Projects matched on title, description, address, city; creator name joined."""

    async def find_matching(
        self, query: str, filters: ProjectFilters, date_range: DateRange
    ) -> list[ProjectRecord]:
        conditions = [
            _text_match(
                like_pattern(query),
                Project.title,
                Project.description,
                Project.address,
                Project.city,
            ),
            *_date_conditions(Project.created_at, date_range),
        ]
        if filters.statuses:
            conditions.append(Project.status.in_(filters.statuses))
        if filters.stages:
            conditions.append(Project.stage.in_(filters.stages))
        stmt = (
            select(
                Project.id,
                Project.title,
                Project.description,
                Project.status,
                Project.stage,
                Project.address,
                Project.city,
                Project.budget,
                Project.created_at,
                Project.updated_at,
                User.name.label("created_by_name"),
            )
            .outerjoin(User, Project.created_by == User.id)
            .where(and_(*conditions))
        )
        rows = await self._fetch(stmt)
        return [
            ProjectRecord(
                id=row["id"],
                title=row["title"],
                status=row["status"],
                stage=row["stage"],
                created_at=ensure_utc(row["created_at"]),
                description=row["description"],
                address=row["address"],
                city=row["city"],
                budget=row["budget"],
                updated_at=ensure_utc(row["updated_at"]),
                created_by_name=row["created_by_name"],
            )
            for row in rows
        ]


class ContactSearchRepository(_RecordStore):
    """Contacts matched on name, email, phone, title, department, company name."""

    async def find_matching(
        self, query: str, filters: ContactFilters, date_range: DateRange
    ) -> list[ContactRecord]:
        conditions = [
            _text_match(
                like_pattern(query),
                Contact.name,
                Contact.email,
                Contact.phone,
                Contact.title,
                Contact.department,
                Company.name,
            ),
            *_date_conditions(Contact.created_at, date_range),
        ]
        if filters.roles:
            conditions.append(Contact.role.in_(filters.roles))
        stmt = (
            select(
                Contact.id,
                Contact.name,
                Contact.email,
                Contact.phone,
                Contact.role,
                Contact.title,
                Contact.department,
                Contact.company_id,
                Contact.created_at,
                Contact.updated_at,
                Company.name.label("company_name"),
                Company.type.label("company_type"),
            )
            .outerjoin(Company, Contact.company_id == Company.id)
            .where(and_(*conditions))
        )
        rows = await self._fetch(stmt)
        return [
            ContactRecord(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                role=row["role"],
                created_at=ensure_utc(row["created_at"]),
                phone=row["phone"],
                title=row["title"],
                department=row["department"],
                company_id=row["company_id"],
                company_name=row["company_name"],
                company_type=row["company_type"],
                updated_at=ensure_utc(row["updated_at"]),
            )
            for row in rows
        ]


class CompanySearchRepository(_RecordStore):
    """Companies matched on name, description, website, email, address, city."""

    async def find_matching(
        self, query: str, filters: CompanyFilters, date_range: DateRange
    ) -> list[CompanyRecord]:
        conditions = [
            _text_match(
                like_pattern(query),
                Company.name,
                Company.description,
                Company.website,
                Company.email,
                Company.address,
                Company.city,
            ),
            *_date_conditions(Company.created_at, date_range),
        ]
        if filters.types:
            conditions.append(Company.type.in_(filters.types))
        stmt = select(
            Company.id,
            Company.name,
            Company.type,
            Company.description,
            Company.website,
            Company.email,
            Company.phone,
            Company.address,
            Company.city,
            Company.state,
            Company.country,
            Company.created_at,
            Company.updated_at,
        ).where(and_(*conditions))
        rows = await self._fetch(stmt)
        return [
            CompanyRecord(
                id=row["id"],
                name=row["name"],
                type=row["type"],
                created_at=ensure_utc(row["created_at"]),
                description=row["description"],
                website=row["website"],
                email=row["email"],
                phone=row["phone"],
                address=row["address"],
                city=row["city"],
                state=row["state"],
                country=row["country"],
                updated_at=ensure_utc(row["updated_at"]),
            )
            for row in rows
        ]


class DocumentSearchRepository(_RecordStore):
    """Documents matched on name, description, tags, latest file name and version notes.

    Only the newest version (by created_at) of each document is joined, so a
    document yields at most one candidate row.
    """

    async def find_matching(
        self, query: str, filters: DocumentFilters, date_range: DateRange
    ) -> list[DocumentRecord]:
        latest = select(
            ProjectDocumentVersion.document_id,
            ProjectDocumentVersion.file_name,
            ProjectDocumentVersion.file_size,
            ProjectDocumentVersion.version_notes,
            func.row_number()
            .over(
                partition_by=ProjectDocumentVersion.document_id,
                order_by=ProjectDocumentVersion.created_at.desc(),
            )
            .label("rn"),
        ).subquery("latest_version")
        conditions = [
            _text_match(
                like_pattern(query),
                ProjectDocument.name,
                ProjectDocument.description,
                ProjectDocument.tags,
                latest.c.file_name,
                latest.c.version_notes,
            ),
            *_date_conditions(ProjectDocument.created_at, date_range),
        ]
        if filters.types:
            conditions.append(ProjectDocument.type.in_(filters.types))
        stmt = (
            select(
                ProjectDocument.id,
                ProjectDocument.name,
                ProjectDocument.description,
                ProjectDocument.type,
                ProjectDocument.current_version,
                ProjectDocument.tags,
                ProjectDocument.project_id,
                ProjectDocument.created_at,
                ProjectDocument.updated_at,
                Project.title.label("project_title"),
                User.name.label("created_by_name"),
                latest.c.file_name.label("latest_file_name"),
                latest.c.file_size.label("latest_file_size"),
                latest.c.version_notes.label("latest_version_notes"),
            )
            .outerjoin(Project, ProjectDocument.project_id == Project.id)
            .outerjoin(User, ProjectDocument.created_by == User.id)
            .outerjoin(
                latest,
                and_(latest.c.document_id == ProjectDocument.id, latest.c.rn == 1),
            )
            .where(and_(*conditions))
        )
        rows = await self._fetch(stmt)
        return [
            DocumentRecord(
                id=row["id"],
                name=row["name"],
                type=row["type"],
                current_version=row["current_version"],
                created_at=ensure_utc(row["created_at"]),
                description=row["description"],
                tags=row["tags"],
                project_id=row["project_id"],
                project_title=row["project_title"],
                created_by_name=row["created_by_name"],
                latest_file_name=row["latest_file_name"],
                latest_file_size=row["latest_file_size"],
                latest_version_notes=row["latest_version_notes"],
                updated_at=ensure_utc(row["updated_at"]),
            )
            for row in rows
        ]
