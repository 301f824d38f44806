"""Tests for modules/orders/repository.py against an in-memory database."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from modules.orders.models import CreateOrderRequest
from modules.orders.repository import OrderRepository


class FakeClock:
    """Clock that advances one minute on every call."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


START = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo(session_factory) -> OrderRepository:
    return OrderRepository(session_factory, clock=FakeClock(START))


def order_request(product="Book", quantity=1, price="9.99") -> CreateOrderRequest:
    return CreateOrderRequest(product=product, quantity=quantity, price=Decimal(price))


class TestCreate:
    def test_assigns_id_and_timestamp(self, repo):
        order = repo.create(1, order_request(quantity=2))

        assert order.id > 0
        assert order.user_id == 1
        assert order.product == "Book"
        assert order.quantity == 2
        assert order.price == Decimal("9.99")
        assert order.created_at == START

    def test_does_not_check_owner(self, repo):
        """Owner existence is the service's job."""
        assert repo.create(404, order_request()).user_id == 404


class TestListByUser:
    def test_newest_first(self, repo):
        first = repo.create(1, order_request(product="A"))
        second = repo.create(1, order_request(product="B"))
        third = repo.create(1, order_request(product="C"))

        orders = repo.list_by_user(1)

        assert [o.id for o in orders] == [third.id, second.id, first.id]
        assert all(o.created_at.tzinfo is not None for o in orders)

    def test_only_that_users_orders(self, repo):
        repo.create(1, order_request(product="Mine"))
        repo.create(2, order_request(product="Theirs"))

        assert [o.product for o in repo.list_by_user(1)] == ["Mine"]

    def test_empty(self, repo):
        assert repo.list_by_user(1) == []
