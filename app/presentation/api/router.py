"""Top-level API router — includes every endpoint router under /api."""

from fastapi import APIRouter

from app.presentation.api.endpoints.health import router as health_router
from app.presentation.api.endpoints.employees import router as employees_router
from app.presentation.api.endpoints.locations import router as locations_router
from app.presentation.api.endpoints.assembly_records import router as assembly_records_router
from app.presentation.api.endpoints.settings import router as settings_router
from app.presentation.api.endpoints.reports import router as reports_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(employees_router)
router.include_router(locations_router)
router.include_router(assembly_records_router)
router.include_router(settings_router)
router.include_router(reports_router)
