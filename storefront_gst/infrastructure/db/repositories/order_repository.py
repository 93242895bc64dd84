# storefront_gst/infrastructure/db/repositories/order_repository.py
"""
Boundary to the hosted order store.

The engine only needs two calls: read completed orders for a period and
write the GSTR-1 export audit snapshot. Production wires an adapter for
the real backend; InMemoryOrderRepository backs tests and local scripts.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Protocol

from storefront_gst.domain.models.gstr1 import Gstr1ExportSnapshot
from storefront_gst.domain.models.order import OrderRecord

COMPLETED_STATUS = "completed"


class OrderRepository(Protocol):
    async def list_completed_orders(self, start: date, end: date) -> list[OrderRecord]:
        """Completed orders created between start and end (inclusive), oldest first."""
        ...

    async def save_gstr1_export(self, snapshot: Gstr1ExportSnapshot) -> None:
        ...


class InMemoryOrderRepository:
    def __init__(self, orders: list[OrderRecord] | None = None) -> None:
        self.orders: list[OrderRecord] = list(orders or [])
        self.exports: list[Gstr1ExportSnapshot] = []

    def add(self, order: OrderRecord) -> None:
        self.orders.append(order)

    @staticmethod
    def _bounds(start: date, end: date) -> tuple[datetime, datetime]:
        return datetime.combine(start, time.min), datetime.combine(end, time.max)

    async def list_completed_orders(self, start: date, end: date) -> list[OrderRecord]:
        lo, hi = self._bounds(start, end)
        matched = [
            o
            for o in self.orders
            if o.status == COMPLETED_STATUS
            and lo <= o.created_at.replace(tzinfo=None) <= hi
        ]
        return sorted(matched, key=lambda o: o.created_at.replace(tzinfo=None))

    async def save_gstr1_export(self, snapshot: Gstr1ExportSnapshot) -> None:
        self.exports.append(snapshot)
