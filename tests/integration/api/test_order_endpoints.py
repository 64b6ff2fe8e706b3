"""Integration tests for order endpoints."""

from decimal import Decimal

import pytest

MISSING_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def placed_order(test_client, auth_headers, deck_product, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/orders",
        json={"items": [{"product_id": deck_product["id"], "quantity": 2}]},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def other_customer_headers(test_client, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json={"email": "other@example.com", "password": "AnotherPass123!"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


class TestPlaceOrder:
    def test_order_is_priced_from_catalog(self, placed_order, deck_product):
        assert placed_order["status"] == "PENDING"
        assert placed_order["order_number"].startswith("ORD-")
        assert Decimal(placed_order["subtotal"]) == Decimal("119.98")
        assert Decimal(placed_order["total_amount"]) == Decimal("119.98")

        [item] = placed_order["items"]
        assert item["product_id"] == deck_product["id"]
        assert item["quantity"] == 2
        assert Decimal(item["unit_price"]) == Decimal("59.99")
        assert Decimal(item["total_price"]) == Decimal("119.98")

    def test_default_shipping_address_is_used(
        self,
        test_client,
        auth_headers,
        deck_product,
        api_v1_prefix,
    ):
        address = test_client.post(
            f"{api_v1_prefix}/users/addresses",
            json={
                "first_name": "Ann",
                "last_name": "Rider",
                "address_line1": "1 Ramp Rd",
                "city": "Portland",
                "state": "OR",
                "postal_code": "97201",
                "is_default": True,
            },
            headers=auth_headers,
        ).json()

        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 1}]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["shipping_address_id"] == address["id"]

    def test_missing_product_stores_nothing(
        self,
        test_client,
        auth_headers,
        deck_product,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={
                "items": [
                    {"product_id": deck_product["id"], "quantity": 1},
                    {"product_id": MISSING_ID, "quantity": 1},
                ],
            },
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "PRODUCT_NOT_FOUND"
        mine = test_client.get(f"{api_v1_prefix}/orders/my-orders", headers=auth_headers)
        assert mine.json() == []

    def test_empty_items_is_validation_error(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": []},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_zero_quantity_is_validation_error(
        self,
        test_client,
        auth_headers,
        deck_product,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 0}]},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_oversized_quantity_is_validation_error(
        self,
        test_client,
        auth_headers,
        deck_product,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 10**19}]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        mine = test_client.get(f"{api_v1_prefix}/orders/my-orders", headers=auth_headers)
        assert mine.json() == []

    def test_subtotal_too_large_to_store_is_rejected(
        self,
        test_client,
        auth_headers,
        admin_headers,
        deck_product,
        api_v1_prefix,
    ):
        test_client.put(
            f"{api_v1_prefix}/products/{deck_product['id']}",
            json={"price": "20000000.00"},
            headers=admin_headers,
        )

        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 5}]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "ORDER_TOTAL_TOO_LARGE"

    def test_inactive_product_is_unavailable(
        self,
        test_client,
        auth_headers,
        admin_headers,
        deck_product,
        api_v1_prefix,
    ):
        test_client.put(
            f"{api_v1_prefix}/products/{deck_product['id']}",
            json={"is_active": False},
            headers=admin_headers,
        )

        response = test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 1}]},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"] == "PRODUCT_UNAVAILABLE"

    def test_price_snapshot_survives_catalog_change(
        self,
        test_client,
        auth_headers,
        admin_headers,
        placed_order,
        deck_product,
        api_v1_prefix,
    ):
        test_client.put(
            f"{api_v1_prefix}/products/{deck_product['id']}",
            json={"price": "99.00"},
            headers=admin_headers,
        )

        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=auth_headers,
        )

        assert Decimal(response.json()["items"][0]["unit_price"]) == Decimal("59.99")
        assert Decimal(response.json()["total_amount"]) == Decimal("119.98")


class TestReadOrders:
    def test_my_orders(self, test_client, auth_headers, placed_order, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/orders/my-orders",
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [placed_order["id"]]

    def test_order_detail_includes_relations(
        self,
        test_client,
        auth_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == "rider@example.com"
        assert data["items"][0]["product"]["sku"] == "DECK-1"

    def test_other_customer_cannot_see_order(
        self,
        test_client,
        other_customer_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=other_customer_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "ORDER_NOT_FOUND"

    def test_admin_lists_all_orders(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(f"{api_v1_prefix}/orders", headers=admin_headers)

        assert response.status_code == 200
        [order] = response.json()
        assert order["id"] == placed_order["id"]
        assert order["user"]["email"] == "rider@example.com"

    def test_customer_cannot_list_all_orders(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.get(f"{api_v1_prefix}/orders", headers=auth_headers)

        assert response.status_code == 403


class TestOrderLifecycle:
    def _set_status(self, client, prefix, headers, order_id, status):
        return client.put(
            f"{prefix}/orders/{order_id}/status",
            json={"status": status},
            headers=headers,
        )

    def test_admin_confirms_order(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._set_status(
            test_client,
            api_v1_prefix,
            admin_headers,
            placed_order["id"],
            "CONFIRMED",
        )

        assert response.status_code == 200
        assert response.json()["status"] == "CONFIRMED"

    def test_customer_cannot_change_status(
        self,
        test_client,
        auth_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._set_status(
            test_client,
            api_v1_prefix,
            auth_headers,
            placed_order["id"],
            "DELIVERED",
        )

        assert response.status_code == 403
        order = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=auth_headers,
        )
        assert order.json()["status"] == "PENDING"

    def test_backwards_transition_is_conflict(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        self._set_status(
            test_client,
            api_v1_prefix,
            admin_headers,
            placed_order["id"],
            "SHIPPED",
        )

        response = self._set_status(
            test_client,
            api_v1_prefix,
            admin_headers,
            placed_order["id"],
            "PENDING",
        )

        assert response.status_code == 409
        assert response.json()["error"] == "INVALID_STATUS_TRANSITION"

    def test_unknown_status_is_validation_error(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._set_status(
            test_client,
            api_v1_prefix,
            admin_headers,
            placed_order["id"],
            "LOST",
        )

        assert response.status_code == 400

    def test_customer_edits_pending_order(
        self,
        test_client,
        auth_headers,
        placed_order,
        deck_product,
        api_v1_prefix,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            json={"items": [{"product_id": deck_product["id"], "quantity": 3}]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["items"][0]["quantity"] == 3
        assert Decimal(response.json()["total_amount"]) == Decimal("179.97")

    def test_failed_item_replacement_keeps_previous_items(
        self,
        test_client,
        auth_headers,
        placed_order,
        deck_product,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/orders/{placed_order['id']}"

        response = test_client.put(
            url,
            json={
                "items": [
                    {"product_id": deck_product["id"], "quantity": 1},
                    {"product_id": MISSING_ID, "quantity": 1},
                ],
            },
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "PRODUCT_NOT_FOUND"
        order = test_client.get(url, headers=auth_headers).json()
        assert [item["quantity"] for item in order["items"]] == [2]
        assert Decimal(order["subtotal"]) == Decimal("119.98")
        assert Decimal(order["total_amount"]) == Decimal("119.98")

    def test_customer_cannot_edit_confirmed_order(
        self,
        test_client,
        auth_headers,
        admin_headers,
        placed_order,
        deck_product,
        api_v1_prefix,
    ):
        self._set_status(
            test_client,
            api_v1_prefix,
            admin_headers,
            placed_order["id"],
            "CONFIRMED",
        )

        response = test_client.put(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            json={"items": [{"product_id": deck_product["id"], "quantity": 5}]},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"] == "ORDER_NOT_EDITABLE"
        order = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=auth_headers,
        ).json()
        assert order["items"][0]["quantity"] == 2

    def test_other_customer_cannot_edit_order(
        self,
        test_client,
        other_customer_headers,
        placed_order,
        deck_product,
        api_v1_prefix,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            json={"items": [{"product_id": deck_product["id"], "quantity": 1}]},
            headers=other_customer_headers,
        )

        assert response.status_code == 404
