from __future__ import annotations

from typing import Protocol, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from laptop_api.models.laptop import Laptop
from laptop_api.schemas.laptop import LaptopCreate


class LaptopStore(Protocol):
    """Storage capabilities the laptop handlers rely on."""

    async def insert(self, obj_in: LaptopCreate) -> Laptop: ...

    async def get_by_id(self, laptop_id: int) -> Laptop | None: ...

    async def get_all(self) -> Sequence[Laptop]: ...

    async def update(self, laptop_id: int, obj_in: LaptopCreate) -> bool: ...

    async def delete(self, laptop_id: int) -> bool: ...


class CRUDLaptop:
    """SQL-backed ``LaptopStore`` bound to one session.

    Each method issues a single statement. ``update`` and ``delete`` report
    whether a row was affected so callers can tell not-found apart.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def insert(self, obj_in: LaptopCreate) -> Laptop:
        db_obj = Laptop(**obj_in.column_values())
        self.db.add(db_obj)
        await self.db.commit()
        await self.db.refresh(db_obj)
        return db_obj

    async def get_by_id(self, laptop_id: int) -> Laptop | None:
        return await self.db.get(Laptop, laptop_id)

    async def get_all(self) -> Sequence[Laptop]:
        res = await self.db.execute(select(Laptop).order_by(Laptop.id))
        return res.scalars().all()

    async def update(self, laptop_id: int, obj_in: LaptopCreate) -> bool:
        stmt = update(Laptop).where(Laptop.id == laptop_id).values(**obj_in.column_values())
        res = await self.db.execute(stmt)
        await self.db.commit()
        return res.rowcount > 0

    async def delete(self, laptop_id: int) -> bool:
        res = await self.db.execute(delete(Laptop).where(Laptop.id == laptop_id))
        await self.db.commit()
        return res.rowcount > 0
