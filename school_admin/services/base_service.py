# school_admin/services/base_service.py
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, List, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.models import DocumentModel


class BaseService:
    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def transaction(self):
        """Context manager for transaction handling"""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def fetch_by_ids(self, model: Type[DocumentModel], ids: Iterable[str]) -> Dict[str, Any]:
        """Load every record of ``model`` whose id is in ``ids``, keyed by id.

        Ids with no matching record are simply missing from the result.
        """
        wanted = {i for i in ids if i}
        if not wanted:
            return {}
        result = await self.db.execute(select(model).where(model.id.in_(wanted)))
        return {record.id: record for record in result.scalars().all()}

    async def list_all(self, model: Type[DocumentModel]) -> List[Any]:
        result = await self.db.execute(select(model).order_by(model.created_at))
        return list(result.scalars().all())
