"""Authorization service: role-based read gate for search (IAuthorizationService)."""

from __future__ import annotations

from app.application.dtos.user import Principal
from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException, AuthorizationException

_READ_ROLES = frozenset({UserRole.ADMIN.value, UserRole.STAFF.value, UserRole.READONLY.value})


class AuthorizationService:
    """Centralized permission checking based on the caller's role."""

    def can_read(self, principal: Principal) -> bool:
        """Return True if role is admin, staff, or readonly."""
        return principal.role in _READ_ROLES

    def require_read(self, principal: Principal | None, resource: str = "search") -> Principal:
        """Raise AuthenticationException if no principal, AuthorizationException if it cannot read."""
        if principal is None:
            raise AuthenticationException("Unauthorized: user not authenticated")
        if not self.can_read(principal):
            raise AuthorizationException(resource=resource, action="read")
        return principal
