"""API layer - routing and dependencies."""

from fastapi import APIRouter


def get_api_router() -> APIRouter:
    """Import router lazily to avoid circular imports."""
    from timescrub.api.router import api_router  # noqa: PLC0415

    return api_router


__all__ = ["get_api_router"]
