"""Base repository: generic CRUD and ordered pagination over one integer-keyed model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from timesheet.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, find_one, find, save, delete_by_id, paginate.

    The model must expose an integer ``id`` primary key. Criteria passed to
    find_one/find are column equality filters (``role_id=5``).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def find_one(self, **criteria: Any) -> ModelType | None:
        """Return the first record matching all criteria, or None."""
        result = await self.db.execute(
            select(self.model).filter_by(**criteria).limit(1)
        )
        return result.scalars().first()

    async def find(self, **criteria: Any) -> list[ModelType]:
        """Return all records matching all criteria in storage order."""
        result = await self.db.execute(select(self.model).filter_by(**criteria))
        return list(result.scalars().all())

    async def save(self, obj: ModelType) -> ModelType:
        """Insert obj when it has no id, otherwise merge it over the stored row.

        Merge copies only the attributes set on obj, so columns the caller never
        assigned (e.g. created_by) keep their stored values.
        """
        model: Any = obj
        if model.id is None:
            self.db.add(obj)
        else:
            obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, entity_id: int) -> int:
        """Delete by primary key; return the number of affected rows."""
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        await self.db.flush()
        return result.rowcount or 0

    async def paginate(self, page: int, limit: int) -> tuple[list[ModelType], int]:
        """Return one page (1-based) ordered by id descending, plus the total count."""
        model: Any = self.model
        total = await self.db.scalar(select(func.count()).select_from(self.model))
        result = await self.db.execute(
            select(self.model)
            .order_by(model.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return list(result.scalars().all()), int(total or 0)
