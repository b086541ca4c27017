"""Subscription Plan Repository Interface

Read-only access to the plan catalogue.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.subscription_plan import SubscriptionPlan


class SubscriptionPlanRepository(ABC):
    """Repository interface for SubscriptionPlan lookups"""

    @abstractmethod
    async def get_by_id(self, plan_id: str) -> Optional[SubscriptionPlan]:
        """
        Retrieve plan by ID

        Args:
            plan_id: Plan identifier

        Returns:
            SubscriptionPlan if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[SubscriptionPlan]:
        """
        Retrieve all plans ordered by price

        Returns:
            List of plans
        """
        pass
