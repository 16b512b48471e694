"""API route modules"""
from .documents import router as documents_router
from .ask import router as ask_router
from .system import router as system_router

__all__ = ["documents_router", "ask_router", "system_router"]
