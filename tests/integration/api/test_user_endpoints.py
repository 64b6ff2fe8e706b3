"""Integration tests for user, address, preference and avatar endpoints."""

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _address(**overrides) -> dict:
    return {
        "first_name": "Ann",
        "last_name": "Rider",
        "address_line1": "1 Ramp Rd",
        "city": "Portland",
        "state": "OR",
        "postal_code": "97201",
        **overrides,
    }


class TestProfile:
    def test_profile_includes_addresses_and_preferences(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        test_client.post(
            f"{api_v1_prefix}/users/addresses",
            json=_address(is_default=True),
            headers=auth_headers,
        )

        response = test_client.get(f"{api_v1_prefix}/users/profile", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "rider@example.com"
        assert len(data["addresses"]) == 1
        assert data["preferences"] is None

    def test_update_profile_keeps_omitted_fields(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/profile",
            json={"last_name": "Rider", "phone": "555-0100"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["first_name"] == "Ann"
        assert data["last_name"] == "Rider"
        assert data["phone"] == "555-0100"

    def test_password_change_takes_effect(
        self,
        test_client,
        auth_headers,
        registered_user_data,
        api_v1_prefix,
    ):
        test_client.put(
            f"{api_v1_prefix}/users/profile",
            json={"password": "BrandNewPass456!"},
            headers=auth_headers,
        )

        old = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )
        new = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": registered_user_data["email"], "password": "BrandNewPass456!"},
        )

        assert old.status_code == 401
        assert new.status_code == 200


class TestAddresses:
    def test_new_default_replaces_previous_default(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        first = test_client.post(
            url,
            json=_address(is_default=True),
            headers=auth_headers,
        ).json()
        second = test_client.post(
            url,
            json=_address(address_line1="2 Bowl Ave", is_default=True),
            headers=auth_headers,
        ).json()

        addresses = {a["id"]: a for a in test_client.get(url, headers=auth_headers).json()}

        assert addresses[second["id"]]["is_default"] is True
        assert addresses[first["id"]]["is_default"] is False

    def test_defaults_are_tracked_per_type(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        shipping = test_client.post(
            url,
            json=_address(is_default=True),
            headers=auth_headers,
        ).json()
        billing = test_client.post(
            url,
            json=_address(type="BILLING", is_default=True),
            headers=auth_headers,
        ).json()

        addresses = {a["id"]: a for a in test_client.get(url, headers=auth_headers).json()}

        assert addresses[shipping["id"]]["is_default"] is True
        assert addresses[billing["id"]]["is_default"] is True

    def test_update_and_delete_address(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        address = test_client.post(url, json=_address(), headers=auth_headers).json()

        updated = test_client.put(
            f"{url}/{address['id']}",
            json={"city": "Seattle"},
            headers=auth_headers,
        )
        deleted = test_client.delete(f"{url}/{address['id']}", headers=auth_headers)

        assert updated.status_code == 200
        assert updated.json()["city"] == "Seattle"
        assert updated.json()["address_line1"] == "1 Ramp Rd"
        assert deleted.status_code == 200
        assert test_client.get(url, headers=auth_headers).json() == []

    def test_explicit_null_clears_optional_fields(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        address = test_client.post(
            url,
            json=_address(company="Ramp Co", phone="555-0100"),
            headers=auth_headers,
        ).json()

        response = test_client.put(
            f"{url}/{address['id']}",
            json={"company": None},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["company"] is None
        assert response.json()["phone"] == "555-0100"
        stored = test_client.get(url, headers=auth_headers).json()
        assert stored[0]["company"] is None

    def test_explicit_null_for_required_field_is_rejected(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        address = test_client.post(url, json=_address(), headers=auth_headers).json()

        response = test_client.put(
            f"{url}/{address['id']}",
            json={"city": None},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert test_client.get(url, headers=auth_headers).json()[0]["city"] == "Portland"

    def test_addresses_are_private(
        self,
        test_client,
        auth_headers,
        admin_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/addresses"
        address = test_client.post(url, json=_address(), headers=auth_headers).json()

        response = test_client.delete(f"{url}/{address['id']}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "ADDRESS_NOT_FOUND"
        assert len(test_client.get(url, headers=auth_headers).json()) == 1

    def test_missing_required_field_is_validation_error(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        payload = _address()
        del payload["city"]

        response = test_client.post(
            f"{api_v1_prefix}/users/addresses",
            json=payload,
            headers=auth_headers,
        )

        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["details"]["errors"]]
        assert "body.city" in fields


class TestPreferences:
    def test_first_save_applies_defaults(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/users/preferences",
            json={"skill_level": "ADVANCED", "preferred_brands": ["Baker"]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["skill_level"] == "ADVANCED"
        assert data["preferred_brands"] == ["Baker"]
        assert data["currency"] == "USD"
        assert data["measurement_unit"] == "IMPERIAL"
        assert data["email_notifications"] is True

    def test_later_save_merges(self, test_client, auth_headers, api_v1_prefix):
        url = f"{api_v1_prefix}/users/preferences"
        test_client.post(url, json={"skill_level": "ADVANCED"}, headers=auth_headers)
        test_client.post(url, json={"currency": "EUR"}, headers=auth_headers)

        response = test_client.get(url, headers=auth_headers)

        assert response.json()["skill_level"] == "ADVANCED"
        assert response.json()["currency"] == "EUR"

    def test_no_preferences_yet(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/users/preferences",
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() is None

    def test_unknown_measurement_unit_is_rejected(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/users/preferences",
            json={"measurement_unit": "CUBITS"},
            headers=auth_headers,
        )

        assert response.status_code == 400


class TestAvatar:
    def test_upload_sets_avatar_and_serves_file(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/users/avatar",
            files={"avatar": ("me.PNG", PNG_BYTES, "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        avatar = response.json()["avatar"]
        assert avatar.startswith("/uploads/avatars/")
        assert avatar.endswith(".png")

        served = test_client.get(avatar)
        assert served.status_code == 200
        assert served.content == PNG_BYTES

    def test_new_upload_replaces_previous_file(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/avatar"
        files = {"avatar": ("me.png", PNG_BYTES, "image/png")}
        first = test_client.post(url, files=files, headers=auth_headers).json()
        second = test_client.post(url, files=files, headers=auth_headers).json()

        assert second["avatar"] != first["avatar"]
        assert test_client.get(first["avatar"]).status_code == 404
        assert test_client.get(second["avatar"]).status_code == 200

    @pytest.mark.parametrize(
        "avatar",
        ["/uploads/avatars/someone-else.png", "  /uploads/../uploads/avatars/x.png"],
    )
    def test_profile_cannot_point_at_stored_uploads(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
        avatar,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/profile",
            json={"avatar": avatar},
            headers=auth_headers,
        )

        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["details"]["errors"]]
        assert "body.avatar" in fields

    def test_external_avatar_url_is_accepted(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/profile",
            json={"avatar": "https://cdn.example.com/me.png"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["avatar"] == "https://cdn.example.com/me.png"

    def test_upload_never_removes_another_users_file(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        url = f"{api_v1_prefix}/users/avatar"
        files = {"avatar": ("me.png", PNG_BYTES, "image/png")}
        victim = test_client.post(url, files=files, headers=auth_headers).json()
        other = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "other@example.com", "password": "AnotherPass123!"},
        ).json()
        other_headers = {"Authorization": f"Bearer {other['access_token']}"}

        hijack = test_client.put(
            f"{api_v1_prefix}/users/profile",
            json={"avatar": victim["avatar"]},
            headers=other_headers,
        )
        test_client.post(url, files=files, headers=other_headers)

        assert hijack.status_code == 400
        assert test_client.get(victim["avatar"]).status_code == 200

    def test_admin_cannot_assign_stored_upload(
        self,
        test_client,
        admin_headers,
        auth_headers,
        api_v1_prefix,
    ):
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers).json()

        response = test_client.put(
            f"{api_v1_prefix}/users/{me['id']}",
            json={"avatar": "/uploads/avatars/someone-else.png"},
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        ("filename", "content"),
        [
            ("notes.txt", b"hello"),
            ("huge.png", b"\x00" * 2048),
        ],
    )
    def test_rejected_uploads(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
        filename,
        content,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/users/avatar",
            files={"avatar": (filename, content, "application/octet-stream")},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_FILE"
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers)
        assert me.json()["avatar"] is None


class TestUserAdministration:
    def test_admin_creates_and_lists_users(
        self,
        test_client,
        admin_headers,
        api_v1_prefix,
    ):
        created = test_client.post(
            f"{api_v1_prefix}/users",
            json={
                "email": "staff@skateshop.com",
                "password": "StaffPass123!",
                "role": "ADMIN",
            },
            headers=admin_headers,
        )
        assert created.status_code == 201
        assert created.json()["role"] == "ADMIN"

        listing = test_client.get(f"{api_v1_prefix}/users", headers=admin_headers)

        emails = {u["email"] for u in listing.json()}
        assert emails == {"admin@skateshop.com", "staff@skateshop.com"}

    def test_admin_deactivates_user(
        self,
        test_client,
        admin_headers,
        auth_headers,
        api_v1_prefix,
    ):
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers).json()

        response = test_client.put(
            f"{api_v1_prefix}/users/{me['id']}",
            json={"is_active": False},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["is_active"] is False
        blocked = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers)
        assert blocked.status_code == 403
        assert blocked.json()["error"] == "ACCOUNT_DEACTIVATED"

    def test_customer_cannot_list_users(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/users", headers=auth_headers)

        assert response.status_code == 403

    def test_admin_cannot_delete_self(
        self,
        test_client,
        admin_headers,
        admin_user,
        api_v1_prefix,
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/users/{admin_user.id}",
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "CANNOT_DELETE_SELF"

    def test_user_with_orders_cannot_be_deleted(
        self,
        test_client,
        admin_headers,
        auth_headers,
        deck_product,
        api_v1_prefix,
    ):
        test_client.post(
            f"{api_v1_prefix}/orders",
            json={"items": [{"product_id": deck_product["id"], "quantity": 1}]},
            headers=auth_headers,
        )
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers).json()

        response = test_client.delete(
            f"{api_v1_prefix}/users/{me['id']}",
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"] == "USER_HAS_ORDERS"

    def test_admin_deletes_user_without_orders(
        self,
        test_client,
        admin_headers,
        auth_headers,
        api_v1_prefix,
    ):
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers).json()

        response = test_client.delete(
            f"{api_v1_prefix}/users/{me['id']}",
            headers=admin_headers,
        )

        assert response.status_code == 200
        missing = test_client.get(
            f"{api_v1_prefix}/users/{me['id']}",
            headers=admin_headers,
        )
        assert missing.status_code == 404
