"""SQLAlchemy implementation of OrderRepository

Provides persistence for Order entities with pessimistic locking support
so duplicate PayHere notifications settle one at a time.
"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.order_repository import OrderRepository
from src.domain.order import Order


class SqlAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Writes are flushed, never committed (the unit of work commits)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, order: Order) -> Order:
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """
        Retrieve order by ID with optional row-level locking

        Args:
            order_id: Order identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Order if found, None otherwise
        """
        stmt = select(Order).where(Order.id == order_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, order: Order) -> Order:
        self.session.add(order)
        await self.session.flush()
        return order

    async def get_by_ids(self, order_ids: List[str]) -> List[Order]:
        if not order_ids:
            return []
        stmt = (
            select(Order)
            .where(Order.id.in_(order_ids))
            .order_by(Order.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
