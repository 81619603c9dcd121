"""
Orders API

FastAPI router for checkout and order management.
"""

from .routes import router

__all__ = ["router"]
