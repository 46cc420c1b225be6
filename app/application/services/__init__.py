"""Application services: authorization, relevance scoring, ordering, filter catalog."""

from app.application.services.authorization_service import AuthorizationService
from app.application.services.filter_catalog import get_available_filters
from app.application.services.relevance import TITLE_MATCH_BONUS, relevance_score
from app.application.services.result_ordering import paginate, sort_results

__all__ = [
    "AuthorizationService",
    "TITLE_MATCH_BONUS",
    "get_available_filters",
    "paginate",
    "relevance_score",
    "sort_results",
]
