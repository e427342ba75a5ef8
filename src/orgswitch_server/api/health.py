"""Health check endpoints for the grant server."""
import logging

from typing import Dict

from fastapi import APIRouter, status, Depends
from fastapi.responses import JSONResponse
from scitrera_app_framework import Plugin, Variables

from ..lifecycle.fastapi import get_logger, get_variables_dep
from ..services.grant import get_grant_handler_registry
from . import EXT_MULTI_API_ROUTERS

router = APIRouter(tags=['health'])


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns:
        dict: Health status
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
        v: Variables = Depends(get_variables_dep),
        logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """
    Readiness check endpoint verifying that grant handlers are available.

    Returns:
        JSONResponse: Readiness status with served grant types
    """
    checks = {
        "status": "ready",
        "grant_types": [],
    }

    try:
        registry = get_grant_handler_registry(v)
        checks["grant_types"] = registry.grant_types
        if not registry.grant_types:
            checks["status"] = "not_ready"
    except Exception as e:
        logger.error("Grant handler registry check failed: %s", e)
        checks["status"] = "not_ready"

    status_code = (
        status.HTTP_200_OK
        if checks["status"] == "ready"
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )

    return JSONResponse(content=checks, status_code=status_code)


class HealthAPIPlugin(Plugin):
    """Plugin to register health API routes."""

    def extension_point_name(self, v: Variables) -> str:
        return EXT_MULTI_API_ROUTERS

    def is_enabled(self, v: Variables) -> bool:
        return False  # disable "single" extension for a multi-extension plugin

    def initialize(self, v: Variables, logger: logging.Logger) -> object | None:
        return router

    def is_multi_extension(self, v: Variables) -> bool:
        return True
