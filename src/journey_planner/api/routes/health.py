"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_upstream_health_check():
    """Lazy import to avoid startup failures."""
    from ...services.upstream.client import check_health as upstream_health_check
    return upstream_health_check


@router.get("/health/upstream", status_code=status.HTTP_200_OK)
def health_upstream() -> dict:
    """Check that the fleet provider is reachable."""
    try:
        upstream_health_check = _get_upstream_health_check()
        return {"service": "upstream", "healthy": upstream_health_check()}
    except Exception as e:
        return {"service": "upstream", "healthy": False, "error": str(e)}
