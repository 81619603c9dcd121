from fastapi import APIRouter

from marketplace.domains.orders.api.routes import router as orders_router
from marketplace.domains.payments.api.routes import router as payments_router

api_router = APIRouter()

# All routes carry the API_V1_STR prefix from the app factory
api_router.include_router(orders_router)
api_router.include_router(payments_router)
