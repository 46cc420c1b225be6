"""Issue a bearer token for local development (signed with SECRET_KEY).

Usage:
    python -m scripts.issue_token <user_id> [role] [minutes]
role defaults to readonly; minutes defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
All imports use app.*.
"""

import sys
from datetime import timedelta

from app.domain.enums import UserRole
from app.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a token for the given user id and role."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.issue_token <user_id> [role] [minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    role = sys.argv[2] if len(sys.argv) > 2 else UserRole.READONLY.value
    if role not in UserRole.values():
        print(
            f"Unknown role {role!r}; expected one of {', '.join(UserRole.values())}",
            file=sys.stderr,
        )
        sys.exit(1)
    expires = timedelta(minutes=int(sys.argv[3])) if len(sys.argv) > 3 else None
    print(create_access_token({"sub": user_id, "role": role}, expires_delta=expires))


if __name__ == "__main__":
    main()
