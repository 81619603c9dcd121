"""
Payments API

FastAPI router for settlement, seller profiles and revenue reports.
"""

from .routes import router

__all__ = ["router"]
