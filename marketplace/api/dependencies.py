"""
Shared API dependencies.

Authentication is owned by an upstream collaborator; it forwards the
verified caller id in the X-User-Id header.
"""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from marketplace.core.container import DependencyContainer, get_container

USER_ID_HEADER = "X-User-Id"


async def get_current_user_id(x_user_id: str | None = Header(None, alias=USER_ID_HEADER)) -> UUID:
    """Caller identity, or 401 when the header is missing or malformed."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
        )
    try:
        return UUID(x_user_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Malformed {USER_ID_HEADER} header",
        ) from e


def get_dependency_container() -> DependencyContainer:
    """Get dependency container instance."""
    return get_container()


async def require_admin(
    user_id: UUID = Depends(get_current_user_id),  # noqa: B008
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> UUID:
    """Caller id, or 403 unless the caller has an admin profile."""
    if not await container.is_admin(user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user_id


__all__ = [
    "USER_ID_HEADER",
    "get_current_user_id",
    "get_dependency_container",
    "require_admin",
]
