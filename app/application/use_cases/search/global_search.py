"""Global search use case: validate, authorize, fan out, merge, sort, paginate.

SearchService is stateless across calls. Entity searchers run as
concurrent asyncio tasks under one deadline; merging, sorting and
pagination happen after every targeted searcher has returned.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from dataclasses import replace
from typing import TYPE_CHECKING

from app.application.dtos.search import (
    MAX_LIMIT,
    MAX_QUERY_LENGTH,
    CompanyFilters,
    ContactFilters,
    DateRange,
    DocumentFilters,
    FilterCatalog,
    ProjectFilters,
    SearchFilters,
    SearchOptions,
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from app.application.services.filter_catalog import get_available_filters
from app.application.services.result_ordering import paginate, sort_results
from app.domain.enums import EntityKind, SearchEntityType
from app.domain.exceptions import (
    RecordsException,
    SearchTimeoutException,
    UpstreamSearchException,
    ValidationException,
)
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import ensure_utc

if TYPE_CHECKING:
    from app.application.dtos.user import Principal
    from app.application.interfaces.services import IEntitySearcher
    from app.application.services.authorization_service import AuthorizationService

logger = logging.getLogger(__name__)

# Merge order of per-kind result streams (stable sort keeps it for ties).
KIND_ORDER: tuple[EntityKind, ...] = (
    EntityKind.PROJECT,
    EntityKind.CONTACT,
    EntityKind.COMPANY,
    EntityKind.DOCUMENT,
)


def _values(items: list | None) -> tuple[str, ...]:
    return tuple(getattr(i, "value", i) for i in items or ())


def resolve_target_kinds(filters: SearchFilters | None) -> tuple[EntityKind, ...]:
    """Return the entity kinds to search, in merge order. None, empty, or 'all' means all four."""
    selectors = list(filters.entity_types or []) if filters else []
    if not selectors or SearchEntityType.ALL in selectors:
        return KIND_ORDER
    wanted = {SearchEntityType(s).kind for s in selectors}
    return tuple(kind for kind in KIND_ORDER if kind in wanted)


def entity_filters_for(kind: EntityKind, filters: SearchFilters | None) -> object:
    """Build the per-kind structured filter DTO from request filters."""
    f = filters or SearchFilters()
    if kind is EntityKind.PROJECT:
        return ProjectFilters(
            statuses=_values(f.project_status), stages=_values(f.project_stage)
        )
    if kind is EntityKind.CONTACT:
        return ContactFilters(roles=_values(f.contact_roles))
    if kind is EntityKind.COMPANY:
        return CompanyFilters(types=_values(f.company_types))
    return DocumentFilters(types=_values(f.document_types))


def validate_request(request: SearchRequest) -> SearchRequest:
    """Return request with a trimmed query; raise ValidationException on bad input.

    Date bounds must satisfy date_from < date_to strictly: equal bounds are
    rejected here even though other date filters in the application accept them.
    """
    query = (request.query or "").strip()
    if not query:
        raise ValidationException("Search query is required", field="query")
    if len(query) > MAX_QUERY_LENGTH:
        raise ValidationException(
            f"Search query must be {MAX_QUERY_LENGTH} characters or less",
            field="query",
        )
    filters = request.filters
    if filters and filters.date_from is not None and filters.date_to is not None:
        if ensure_utc(filters.date_from) >= ensure_utc(filters.date_to):
            raise ValidationException(
                "Date 'to' must be after date 'from'", field="dateTo"
            )
    options = request.options or SearchOptions()
    if not 1 <= options.limit <= MAX_LIMIT:
        raise ValidationException(
            f"Limit must be between 1 and {MAX_LIMIT}", field="limit"
        )
    if options.offset < 0:
        raise ValidationException("Offset must be 0 or greater", field="offset")
    return replace(request, query=query, options=options)


class SearchService:
    """Federated search across projects, contacts, companies, and documents."""

    def __init__(
        self,
        searchers: dict[EntityKind, IEntitySearcher],
        authorization: AuthorizationService,
        timeout_seconds: float = 30.0,
        allow_partial_results: bool = False,
    ) -> None:
        self.searchers = searchers
        self.authorization = authorization
        self.timeout_seconds = timeout_seconds
        self.allow_partial_results = allow_partial_results

    @traced("search.global")
    async def search(
        self, request: SearchRequest, principal: Principal | None
    ) -> SearchResponse:
        """Run the full pipeline and return one page plus total count.

        Raises:
            ValidationException: Bad query, date range, or paging.
            AuthenticationException / AuthorizationException: Caller cannot read.
            UpstreamSearchException: A record store failed (unless partial mode).
            SearchTimeoutException: Fan-out exceeded timeout_seconds.
        """
        request = validate_request(request)
        self.authorization.require_read(principal)
        options = request.options or SearchOptions()
        kinds = resolve_target_kinds(request.filters)

        started = time.perf_counter()
        merged, warnings = await self._fan_out(request, kinds)
        ordered = sort_results(merged, options.sort_by, options.sort_order)
        page = paginate(ordered, options.offset, options.limit)

        add_span_attributes(
            **{
                "search.kinds": ",".join(k.value for k in kinds),
                "search.total": page.total_count,
                "search.returned": len(page.items),
            }
        )
        logger.info(
            "Search kinds=%s total=%d returned=%d offset=%d duration_ms=%.1f",
            ",".join(k.value for k in kinds),
            page.total_count,
            len(page.items),
            options.offset,
            (time.perf_counter() - started) * 1000,
        )
        return SearchResponse(
            results=page.items,
            total_count=page.total_count,
            has_more=page.has_more,
            query=request.query,
            applied_filters=request.filters,
            warnings=warnings,
        )

    async def load_more(
        self,
        previous_request: SearchRequest,
        new_offset: int,
        principal: Principal | None,
    ) -> SearchResponse:
        """Re-run previous_request at new_offset. Caller concatenates pages."""
        if new_offset < 0:
            raise ValidationException("Offset must be 0 or greater", field="offset")
        options = replace(previous_request.options or SearchOptions(), offset=new_offset)
        return await self.search(replace(previous_request, options=options), principal)

    def get_available_filters(self, principal: Principal | None) -> FilterCatalog:
        """Return the filter catalog (requires read permission)."""
        self.authorization.require_read(principal)
        return get_available_filters()

    async def _fan_out(
        self, request: SearchRequest, kinds: tuple[EntityKind, ...]
    ) -> tuple[list[SearchResult], list[str]]:
        """Run targeted searchers concurrently and concatenate in KIND_ORDER.

        Any failure (strict mode), timeout, or cancellation cancels the
        remaining tasks and fails the whole request.
        """
        filters = request.filters
        date_range = DateRange(
            date_from=ensure_utc(filters.date_from) if filters else None,
            date_to=ensure_utc(filters.date_to) if filters else None,
        )
        tasks: dict[EntityKind, asyncio.Task[list[SearchResult]]] = {
            kind: asyncio.create_task(
                self.searchers[kind].search(
                    request.query, entity_filters_for(kind, filters), date_range
                ),
                name=f"search-{kind.value}",
            )
            for kind in kinds
        }
        return_when = (
            asyncio.ALL_COMPLETED if self.allow_partial_results else asyncio.FIRST_EXCEPTION
        )
        try:
            if tasks:
                async with asyncio.timeout(self.timeout_seconds):
                    await asyncio.wait(tasks.values(), return_when=return_when)
        except TimeoutError as e:
            pending = [k.value for k, t in tasks.items() if not t.done()]
            logger.warning(
                "Search timed out after %ss; pending=%s", self.timeout_seconds, pending
            )
            raise SearchTimeoutException(self.timeout_seconds, pending) from e
        finally:
            await self._cancel_pending(tasks.values())

        failures: dict[EntityKind, BaseException] = {}
        for kind, task in tasks.items():
            if not task.cancelled() and task.exception() is not None:
                failures[kind] = task.exception()
                logger.error(
                    "Search failed for %s records", kind.value, exc_info=failures[kind]
                )
        for exc in failures.values():
            # Domain errors (e.g. no database configured) are never partial.
            if isinstance(exc, RecordsException):
                raise exc
        if failures and not self.allow_partial_results:
            kind, exc = next(iter(failures.items()))
            raise UpstreamSearchException(kind.value) from exc
        for kind, task in tasks.items():
            if task.cancelled():
                raise UpstreamSearchException(
                    kind.value, f"Search for {kind.value} records was cancelled"
                )

        merged: list[SearchResult] = []
        warnings: list[str] = []
        for kind, task in tasks.items():
            if kind in failures:
                logger.warning("Dropping %s results (partial results enabled)", kind.value)
                warnings.append(f"Results for {kind.value} records are unavailable")
                continue
            merged.extend(task.result())
        return merged, warnings

    @staticmethod
    async def _cancel_pending(tasks: Iterable[asyncio.Task]) -> None:
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
