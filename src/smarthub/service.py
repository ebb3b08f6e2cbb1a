"""FastAPI service module for the smart home hub.

This module keeps only the web-facing FastAPI wiring. Registry lifecycle and
the device operations live in ``hub_service.py``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.routes_devices import router as devices_router
from .hub_service import HubService

# Global service instance - initialized lazily on first access
_service_instance: HubService | None = None


def get_service() -> HubService:
    """Get or create the singleton hub service instance.

    This lazy initialization keeps importing the module free of filesystem
    side effects until the app actually starts.
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = HubService()
    return _service_instance


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage hub startup and shutdown via FastAPI lifespan."""
    service = get_service()
    # Make service instance available to routers
    app.state.service = service
    await service.start()
    try:
        yield
    finally:
        await service.stop()


app = FastAPI(title="Smart Home Hub", lifespan=lifespan)


@app.get("/api/health")
async def health_check():
    """Health check endpoint for container monitoring."""
    service = get_service()
    return {
        "status": "healthy",
        "service": "smarthub",
        "version": "1.0.0",
        "started_at": service.started_at,
        "devices": len(service.registry),
        "store": str(service.registry.store.path),
    }


app.include_router(devices_router)


def main() -> None:  # pragma: no cover
    """Run the FastAPI service under Uvicorn.

    Configuration is handled via environment variables; see
    ``smarthub.utils.env`` and ``smarthub.logging_config``.
    """
    import logging
    import sys

    import uvicorn

    from .logging_config import configure_logging, get_uvicorn_log_config
    from .utils import get_env_int

    configure_logging()
    logger = logging.getLogger(__name__)

    port = get_env_int("SMART_HUB_PORT", 8000)
    logger.info(f"Starting smart hub on port {port}")

    try:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=port,
            log_config=get_uvicorn_log_config(),
            access_log=True,
        )
    except Exception as e:
        logger.error(f"FATAL ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
