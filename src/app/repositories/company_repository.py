"""Company Repository Interface

Defines the contract for the company fields owned by the payment flow.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """
    Repository interface for Company persistence

    Only settlement writes through this repository; order history rows are
    append-only.
    """

    @abstractmethod
    async def get_by_id(self, company_id: str, for_update: bool = False) -> Optional[Company]:
        """
        Retrieve company by ID

        Args:
            company_id: Company identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Company if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        """
        Persist subscription / credit changes of a company

        Args:
            company: Company entity with updated values

        Returns:
            Updated Company
        """
        pass

    @abstractmethod
    async def has_order(self, company_id: str, order_id: str) -> bool:
        """
        Check whether the order is already in the company's history

        Args:
            company_id: Company identifier
            order_id: Order identifier

        Returns:
            True if present, False otherwise
        """
        pass

    @abstractmethod
    async def append_order(self, company_id: str, order_id: str) -> None:
        """
        Append an order to the company's history

        Args:
            company_id: Company identifier
            order_id: Order identifier

        Raises:
            IntegrityError: If the order is already in the history
        """
        pass

    @abstractmethod
    async def count_orders(self, company_id: str) -> int:
        """
        Count orders in the company's history

        Args:
            company_id: Company identifier

        Returns:
            Number of orders
        """
        pass

    @abstractmethod
    async def list_order_ids(self, company_id: str, limit: int, offset: int) -> List[str]:
        """
        Page through the company's order history, newest entry first

        Args:
            company_id: Company identifier
            limit: Maximum number of ids to return
            offset: Number of ids to skip

        Returns:
            List of order ids
        """
        pass
