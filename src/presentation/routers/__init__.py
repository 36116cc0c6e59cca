"""External-facing routers (non-versioned endpoints)."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
