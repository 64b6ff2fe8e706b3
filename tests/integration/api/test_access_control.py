"""Role table consistency and enforcement."""

import pytest
from fastapi.routing import APIRoute

from boardshop.presentation.api.access_control import ADMIN_ONLY, ROUTE_ROLES, route_key
from boardshop.presentation.api.routers import (
    auth_router,
    categories_router,
    orders_router,
    products_router,
    users_router,
)

API_ROUTERS = [
    auth_router,
    users_router,
    categories_router,
    products_router,
    orders_router,
]


@pytest.fixture(scope="module")
def api_routes() -> list[APIRoute]:
    return [
        route
        for router in API_ROUTERS
        for route in router.routes
        if isinstance(route, APIRoute)
    ]


def test_every_router_contributes_endpoints(api_routes):
    modules = {route_key(route.endpoint).split(".")[0] for route in api_routes}

    assert modules == {"auth", "users", "categories", "products", "orders"}


def test_every_role_entry_names_an_endpoint(api_routes):
    keys = {route_key(route.endpoint) for route in api_routes}

    assert set(ROUTE_ROLES) <= keys


def test_endpoint_keys_are_unique(api_routes):
    keys = [route_key(route.endpoint) for route in api_routes]

    assert len(keys) == len(set(keys))


def test_mutating_catalog_routes_are_admin_only(api_routes):
    mutating = [
        route_key(route.endpoint)
        for route in api_routes
        if route_key(route.endpoint).startswith(("categories.", "products."))
        and route.methods & {"POST", "PUT", "DELETE"}
    ]

    assert len(mutating) == 7
    for key in mutating:
        assert ROUTE_ROLES.get(key) == ADMIN_ONLY, key


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/users"),
        ("GET", "/orders"),
        ("GET", "/products/stock/low"),
        ("POST", "/categories"),
    ],
)
def test_admin_routes_reject_customers(
    test_client,
    auth_headers,
    api_v1_prefix,
    method,
    path,
):
    response = test_client.request(
        method,
        f"{api_v1_prefix}{path}",
        json={"name": "Blocked"} if method == "POST" else None,
        headers=auth_headers,
    )

    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "INSUFFICIENT_ROLE"
    assert body["statusCode"] == 403


@pytest.mark.parametrize(
    "path",
    ["/users", "/orders", "/products/stock/low", "/categories"],
)
def test_admin_routes_accept_admins(test_client, admin_headers, api_v1_prefix, path):
    response = test_client.get(f"{api_v1_prefix}{path}", headers=admin_headers)

    assert response.status_code == 200


def test_customer_cannot_delete_users(
    test_client,
    auth_headers,
    admin_headers,
    admin_user,
    api_v1_prefix,
):
    url = f"{api_v1_prefix}/users/{admin_user.id}"

    response = test_client.delete(url, headers=auth_headers)

    assert response.status_code == 403
    assert response.json()["error"] == "INSUFFICIENT_ROLE"
    still_there = test_client.get(url, headers=admin_headers)
    assert still_there.status_code == 200
    assert still_there.json()["email"] == "admin@skateshop.com"
