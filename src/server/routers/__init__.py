"""API routers."""

from server.routers.check import router as check_router

__all__ = ["check_router"]
