"""
Tests for order API endpoints.

Covers the ownership rules: the token's subject must match the user ID in
the path, and checks run in the order 401, 400, 403, 422.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select

from api.dependencies import get_order_service
from modules.orders.tables import OrderRow
from tests.conftest import auth_header, create_test_token

ORDER = {"product": "Book", "quantity": 2, "price": 9.99}


class TestCreateOrder:
    """Tests for POST /users/{id}/orders"""

    def test_create(self, client, register_user):
        ann = register_user()

        response = client.post(
            f"/users/{ann['id']}/orders", json=ORDER, headers=auth_header(ann["id"]),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["user_id"] == ann["id"]
        assert data["product"] == "Book"
        assert data["quantity"] == 2
        assert data["price"] == 9.99
        assert "created_at" in data

    def test_other_users_orders_forbidden(self, client, register_user):
        register_user()
        bob = register_user(name="Bob", email="bob@example.com")

        response = client.post(
            f"/users/{bob['id']}/orders", json=ORDER, headers=auth_header(bob["id"] + 100),
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Access denied: you can only access your own orders"}

    def test_token_for_5_path_for_7(self, client):
        response = client.post("/users/7/orders", json=ORDER, headers=auth_header(5))
        assert response.status_code == 403

    def test_user_deleted_after_token_issued(self, client, register_user):
        ann = register_user()
        headers = auth_header(ann["id"])
        client.delete(f"/users/{ann['id']}", headers=headers)

        response = client.post(f"/users/{ann['id']}/orders", json=ORDER, headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
        assert client.get(f"/users/{ann['id']}/orders", headers=headers).status_code == 404

    def test_validation_failure(self, client, register_user):
        ann = register_user()

        response = client.post(
            f"/users/{ann['id']}/orders",
            json={"product": "", "quantity": 0, "price": -1},
            headers=auth_header(ann["id"]),
        )

        assert response.status_code == 422
        fields = {d["field"]: d["constraint"] for d in response.json()["details"]}
        assert fields == {"product": "min_length", "quantity": "gte", "price": "gt"}

    def test_too_many_decimal_places(self, client, register_user):
        ann = register_user()

        response = client.post(
            f"/users/{ann['id']}/orders",
            json={"product": "Book", "quantity": 1, "price": "1.999"},
            headers=auth_header(ann["id"]),
        )

        assert response.status_code == 422
        assert response.json()["details"] == [
            {"field": "price", "constraint": "max_decimal_places"},
        ]


class TestCheckOrder:
    """Rejections happen in a fixed order, whatever else is wrong."""

    def test_missing_token_beats_everything(self, client):
        response = client.post("/users/abc/orders", json={"product": ""})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_bad_path_beats_ownership(self, client):
        response = client.post("/users/abc/orders", json={"product": ""}, headers=auth_header(5))

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request parameters"

    def test_ownership_beats_body(self, client):
        response = client.post("/users/7/orders", json={"product": ""}, headers=auth_header(5))
        assert response.status_code == 403

    def test_body_checked_last(self, client, register_user):
        ann = register_user()

        response = client.post(
            f"/users/{ann['id']}/orders", json={"product": ""}, headers=auth_header(ann["id"]),
        )

        assert response.status_code == 422


class TestListOrders:
    """Tests for GET /users/{id}/orders"""

    def test_newest_first(self, client, register_user):
        ann = register_user()
        headers = auth_header(ann["id"])
        created = [
            client.post(
                f"/users/{ann['id']}/orders",
                json={"product": name, "quantity": 1, "price": 1.5},
                headers=headers,
            ).json()
            for name in ("first", "second", "third")
        ]

        response = client.get(f"/users/{ann['id']}/orders", headers=headers)

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [o["id"] for o in reversed(created)]

    def test_empty(self, client, register_user):
        ann = register_user()

        response = client.get(f"/users/{ann['id']}/orders", headers=auth_header(ann["id"]))

        assert response.status_code == 200
        assert response.json() == []

    def test_forbidden(self, client, register_user):
        ann = register_user()
        bob = register_user(name="Bob", email="bob@example.com")

        response = client.get(f"/users/{bob['id']}/orders", headers=auth_header(ann["id"]))

        assert response.status_code == 403

    def test_expired_token(self, client, register_user):
        ann = register_user()
        token = create_test_token(ann["id"], expired=True)

        response = client.get(
            f"/users/{ann['id']}/orders", headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Token is expired"}


class TestOwnershipShortCircuit:
    """A 403 is decided before the order service is reached."""

    @pytest.fixture
    def mock_service(self, client):
        service = MagicMock()
        client.app.dependency_overrides[get_order_service] = lambda: service
        yield service
        client.app.dependency_overrides.clear()

    def test_create_not_invoked(self, client, mock_service):
        response = client.post("/users/999/orders", json=ORDER, headers=auth_header(1))

        assert response.status_code == 403
        mock_service.create_order.assert_not_called()

    def test_list_not_invoked(self, client, mock_service):
        response = client.get("/users/999/orders", headers=auth_header(1))

        assert response.status_code == 403
        mock_service.list_orders.assert_not_called()

    def test_no_row_written(self, client, register_user, session_factory):
        ann = register_user()
        bob = register_user(name="Bob", email="bob@example.com")

        response = client.post(
            f"/users/{bob['id']}/orders", json=ORDER, headers=auth_header(ann["id"]),
        )

        assert response.status_code == 403
        with session_factory() as session:
            assert session.scalar(select(func.count()).select_from(OrderRow)) == 0


class TestPathBounds:
    def test_id_beyond_integer_range(self, client):
        response = client.get(
            "/users/99999999999999999999/orders", headers=auth_header(1),
        )

        assert response.status_code == 400
        assert response.json()["details"] == [{"field": "user_id", "constraint": "lte"}]

    def test_quantity_beyond_integer_range(self, client, register_user):
        ann = register_user()

        response = client.post(
            f"/users/{ann['id']}/orders",
            json={"product": "Book", "quantity": 2**31, "price": 1},
            headers=auth_header(ann["id"]),
        )

        assert response.status_code == 422
        assert response.json()["details"] == [{"field": "quantity", "constraint": "lte"}]
