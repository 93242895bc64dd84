from .order_repository import InMemoryOrderRepository, OrderRepository

__all__ = [
    "OrderRepository",
    "InMemoryOrderRepository",
]
