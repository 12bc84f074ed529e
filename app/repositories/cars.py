import uuid
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.car import Car
from app.schemas.common import DeleteResult, UpdateResult
from app.services.query_builder import CarQuery
from app.utils.dates import as_utc, utcnow

# Columns an upsert may overwrite; the id and the booking counter are not among them.
_REPLACEABLE = (
    "owner_email", "owner_name", "brand", "model", "price", "location",
    "description", "image", "availability", "created_at",
)


def _stored(column: str, value: Any) -> Any:
    return as_utc(value) if column == "created_at" else value


class CarRepository:
    """Car listing persistence. Callers own the transaction boundary."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, data: dict[str, Any]) -> str:
        car = Car(
            id=data.get("id") or str(uuid.uuid4()),
            **{k: _stored(k, data.get(k)) for k in _REPLACEABLE},
            booking_count=0,
        )
        if car.created_at is None:
            car.created_at = utcnow()
        self.session.add(car)
        await self.session.flush()
        return car.id

    async def find_by_id(self, car_id: str) -> Car | None:
        return await self.session.get(Car, car_id)

    async def find_by_owner_email(self, email: str) -> list[Car]:
        result = await self.session.execute(
            select(Car).where(Car.owner_email == email).order_by(Car.created_at, Car.id)
        )
        return list(result.scalars().all())

    async def find_all(self, query: CarQuery) -> list[Car]:
        result = await self.session.execute(query.apply(select(Car)))
        return list(result.scalars().all())

    async def find_latest(self, n: int) -> list[Car]:
        result = await self.session.execute(
            select(Car).order_by(Car.created_at.desc(), Car.id.desc()).limit(n)
        )
        return list(result.scalars().all())

    async def replace_or_create(self, car_id: str, data: dict[str, Any]) -> UpdateResult:
        """Upsert by id. On an existing car only the keys present in ``data`` are overwritten."""
        car = await self.session.get(Car, car_id)
        if car is None:
            await self.insert({**data, "id": car_id})
            return UpdateResult(matched_count=0, modified_count=0, upserted_id=car_id)

        modified = 0
        for column in _REPLACEABLE:
            if column not in data:
                continue
            value = _stored(column, data[column])
            if column == "created_at" and value is None:
                continue
            if _stored(column, getattr(car, column)) != value:
                setattr(car, column, value)
                modified = 1
        await self.session.flush()
        return UpdateResult(matched_count=1, modified_count=modified)

    async def increment_booking_count(self, car_id: str, delta: int = 1) -> UpdateResult:
        """Adjust the counter in a single UPDATE so concurrent bookings never lose a write."""
        stmt = (
            update(Car)
            .where(Car.id == car_id)
            .values(booking_count=Car.booking_count + delta)
            .execution_options(synchronize_session=False)
        )
        if delta < 0:
            stmt = stmt.where(Car.booking_count + delta >= 0)
        result = await self.session.execute(stmt)
        return UpdateResult(matched_count=result.rowcount, modified_count=result.rowcount)

    async def delete(self, car_id: str) -> DeleteResult:
        result = await self.session.execute(
            delete(Car).where(Car.id == car_id).execution_options(synchronize_session=False)
        )
        return DeleteResult(deleted_count=result.rowcount)
