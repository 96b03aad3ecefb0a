from fastapi import APIRouter

from catalog_admin.dependencies import CatalogServiceDep
from catalog_admin.schemas.dashboard import DashboardSummary, IntegrityReport

router = APIRouter()


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Dashboard totals",
)
async def get_summary(service: CatalogServiceDep):
    """
    Totals for the dashboard cards.

    Users, artists, songs and albums are loaded concurrently.
    """
    return await service.dashboard_summary()


@router.get(
    "/integrity",
    response_model=IntegrityReport,
    summary="Dangling reference report",
)
async def get_integrity_report(service: CatalogServiceDep):
    """Ids stored on songs and albums that no longer resolve. Nothing is repaired."""
    return await service.integrity_report()
