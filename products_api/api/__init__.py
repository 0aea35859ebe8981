"""API layer module.

Contains FastAPI routers, middleware and shared dependencies.
"""

from products_api.api.auth import router as auth_router
from products_api.api.brands import router as brands_router
from products_api.api.categories import router as categories_router
from products_api.api.health import router as health_router
from products_api.api.products import router as products_router

__all__ = [
    "auth_router",
    "brands_router",
    "categories_router",
    "health_router",
    "products_router",
]
