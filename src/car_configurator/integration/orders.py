"""
Module: integration.orders

Purpose:
    Thin order record-keeping for finished configurations. An order
    stamps a Car with an id, a creation time and a status.

Key Classes:
    - OrderStatus: Order lifecycle marker
    - Order: Immutable order record
    - OrderService: Places orders and keeps an in-memory history
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Tuple
from uuid import UUID

from car_configurator.core.models.car import Car

logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    """Order lifecycle marker."""
    PLACED = "placed"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Order:
    """
    Order for one car (immutable).

    Attributes:
        car: The ordered configuration
        id: Random UUID
        created_at: Timezone-aware UTC creation time
        status: Current status
    """
    car: Car
    id: UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: OrderStatus = OrderStatus.PLACED

    def __post_init__(self) -> None:
        if not isinstance(self.car, Car):
            raise TypeError(f"car must be a Car, got {self.car!r}")
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")


class OrderService:
    """Places orders and remembers them for the lifetime of the service."""

    def __init__(self) -> None:
        self._orders: Dict[UUID, Order] = {}

    def place_order(self, car: Car) -> Order:
        order = Order(car=car)
        self._orders[order.id] = order
        logger.info(f"Placed order {order.id} for {car}")
        return order

    def get(self, order_id: UUID) -> Optional[Order]:
        return self._orders.get(order_id)

    @property
    def orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders.values())
