"""Search API: federated search across projects, contacts, companies, documents.

Routes resolve the caller without rejecting it; SearchService validates the
request before it checks authentication, so a malformed query is a 400 even
without a token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_current_principal_optional, get_search_service
from app.application.dtos.user import Principal
from app.application.use_cases.search import SearchService
from app.core.limiter import limit_search
from app.schemas.search import (
    FilterCatalogResponse,
    LoadMoreBody,
    SearchRequestBody,
    SearchResponseSchema,
)

router = APIRouter()


@router.post(
    "",
    response_model=SearchResponseSchema,
    response_model_exclude_none=True,
)
@limit_search
async def search(
    request: Request,
    body: SearchRequestBody,
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Search all (or the selected) record kinds; returns one sorted page."""
    response = await search_svc.search(body.to_dto(), principal)
    return SearchResponseSchema.from_dto(response)


@router.post(
    "/more",
    response_model=SearchResponseSchema,
    response_model_exclude_none=True,
)
@limit_search
async def load_more(
    request: Request,
    body: LoadMoreBody,
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Re-run a previous search at a new offset (next page)."""
    response = await search_svc.load_more(
        body.request.to_dto(), body.offset, principal
    )
    return SearchResponseSchema.from_dto(response)


@router.get("/filters", response_model=FilterCatalogResponse)
async def get_available_filters(
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Legal values for each structured filter. Needs read permission; no store is queried."""
    return FilterCatalogResponse.from_dto(search_svc.get_available_filters(principal))
