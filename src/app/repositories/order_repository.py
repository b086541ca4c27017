"""Order Repository Interface

Defines the contract for order persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.order import Order


class OrderRepository(ABC):
    """
    Repository interface for Order persistence

    Orders are never deleted. get_by_id supports pessimistic locking so
    concurrent notifications for the same order settle one at a time.
    """

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """
        Create a new order

        Args:
            order: Order entity to persist

        Returns:
            Created Order
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """
        Retrieve order by ID

        Args:
            order_id: Order identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        """
        Persist status / provider id changes of an order

        Args:
            order: Order entity with updated values

        Returns:
            Updated Order
        """
        pass

    @abstractmethod
    async def get_by_ids(self, order_ids: List[str]) -> List[Order]:
        """
        Retrieve orders by IDs, newest first

        Args:
            order_ids: Order identifiers

        Returns:
            List of orders found (missing ids are skipped)
        """
        pass
