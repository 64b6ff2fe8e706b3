"""Role requirements for protected routes.

Every protected router attaches ``authorize`` as a router-level dependency.
The dependency looks the matched endpoint up in ``ROUTE_ROLES`` by
``"<router module>.<endpoint name>"``; endpoints without an entry accept
any authenticated user.
"""

import logging
from typing import Callable

from fastapi import Depends, Request

from boardshop.domain.shared.exceptions import AuthorizationError
from boardshop.domain.user import User, UserRole
from boardshop.presentation.api.dependencies import get_current_user

logger = logging.getLogger(__name__)

ADMIN_ONLY = frozenset({UserRole.ADMIN})

ROUTE_ROLES: dict[str, frozenset[UserRole]] = {
    # Users
    "users.list_users": ADMIN_ONLY,
    "users.create_user": ADMIN_ONLY,
    "users.get_user": ADMIN_ONLY,
    "users.update_user": ADMIN_ONLY,
    "users.delete_user": ADMIN_ONLY,
    # Categories
    "categories.create_category": ADMIN_ONLY,
    "categories.update_category": ADMIN_ONLY,
    "categories.delete_category": ADMIN_ONLY,
    # Products
    "products.create_product": ADMIN_ONLY,
    "products.update_product": ADMIN_ONLY,
    "products.delete_product": ADMIN_ONLY,
    "products.list_low_stock": ADMIN_ONLY,
    "products.update_stock": ADMIN_ONLY,
    # Orders
    "orders.list_orders": ADMIN_ONLY,
    "orders.update_order_status": ADMIN_ONLY,
}


def route_key(endpoint: Callable) -> str:
    """Identifier of an endpoint in ``ROUTE_ROLES``."""
    module = endpoint.__module__.rsplit(".", 1)[-1]
    return f"{module}.{endpoint.__name__}"


async def authorize(
    request: Request,
    user: User = Depends(get_current_user),
) -> User:
    """
    Check the caller's role against the matched route.

    Raises
    ------
    AuthorizationError
        403 if the route requires a role the caller does not have
    """
    route = request.scope.get("route")
    endpoint = getattr(route, "endpoint", None) or request.scope.get("endpoint")
    if endpoint is None:
        return user

    required = ROUTE_ROLES.get(route_key(endpoint))
    if required and user.role not in required:
        logger.warning(
            "Access denied to %s for %s (role=%s)",
            route_key(endpoint),
            user.email,
            user.role.value,
        )
        raise AuthorizationError()

    return user
