from boardshop.presentation.api.routers.auth import router as auth_router
from boardshop.presentation.api.routers.categories import router as categories_router
from boardshop.presentation.api.routers.orders import router as orders_router
from boardshop.presentation.api.routers.products import router as products_router
from boardshop.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "categories_router",
    "orders_router",
    "products_router",
    "users_router",
]
