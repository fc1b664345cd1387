"""
Tests for orders.
"""

import dataclasses
from datetime import datetime

import pytest

from car_configurator.integration import Order, OrderService, OrderStatus


class TestOrder:
    """Tests for the Order record."""

    def test_init_when_defaults_then_placed_utc_order(self, minimal_sedan):
        order = Order(car=minimal_sedan)

        assert order.status is OrderStatus.PLACED
        assert order.created_at.tzinfo is not None
        assert str(order.status) == "placed"

    def test_init_when_not_a_car_then_raises(self):
        with pytest.raises(TypeError):
            Order(car="SUV")

    def test_init_when_naive_timestamp_then_raises(self, minimal_sedan):
        with pytest.raises(ValueError, match="timezone-aware"):
            Order(car=minimal_sedan, created_at=datetime(2024, 1, 1))

    def test_setattr_when_frozen_then_raises(self, minimal_sedan):
        order = Order(car=minimal_sedan)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.status = OrderStatus.CANCELLED  # type: ignore[misc]


class TestOrderService:
    """Tests for OrderService."""

    def test_place_order_when_called_then_retrievable_by_id(self, luxury_suv):
        service = OrderService()

        order = service.place_order(luxury_suv)

        assert service.get(order.id) is order
        assert order.car == luxury_suv

    def test_place_order_when_called_twice_then_distinct_ids_in_order(self, luxury_suv, minimal_sedan):
        service = OrderService()

        first = service.place_order(luxury_suv)
        second = service.place_order(minimal_sedan)

        assert first.id != second.id
        assert service.orders == (first, second)

    def test_get_when_unknown_id_then_none(self):
        import uuid

        assert OrderService().get(uuid.uuid4()) is None
