"""SQLAlchemy implementation of CompanyRepository

Company rows are locked during settlement; the order history is an
append-only link table with a unique (company_id, order_id) constraint.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company, CompanyOrder


class SqlAlchemyCompanyRepository(CompanyRepository):
    """SQLAlchemy implementation of CompanyRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: str, for_update: bool = False) -> Optional[Company]:
        stmt = select(Company).where(Company.id == company_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, company: Company) -> Company:
        self.session.add(company)
        await self.session.flush()
        return company

    async def has_order(self, company_id: str, order_id: str) -> bool:
        stmt = select(CompanyOrder.id).where(
            CompanyOrder.company_id == company_id,
            CompanyOrder.order_id == order_id,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def append_order(self, company_id: str, order_id: str) -> None:
        """
        Insert a history row

        Note:
            A duplicate (company_id, order_id) raises IntegrityError on flush,
            which rolls back the surrounding settlement.
        """
        self.session.add(CompanyOrder(company_id=company_id, order_id=order_id))
        await self.session.flush()

    async def count_orders(self, company_id: str) -> int:
        stmt = select(func.count(CompanyOrder.id)).where(CompanyOrder.company_id == company_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_order_ids(self, company_id: str, limit: int, offset: int) -> List[str]:
        stmt = (
            select(CompanyOrder.order_id)
            .where(CompanyOrder.company_id == company_id)
            .order_by(CompanyOrder.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
