import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.schemas.common import UpdateResult
from app.utils.dates import as_utc, utcnow

_DATE_COLUMNS = {"start_date", "end_date", "created_at"}


def _stored(column: str, value: Any) -> Any:
    return as_utc(value) if column in _DATE_COLUMNS else value


class BookingRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, data: dict[str, Any]) -> Booking:
        booking = Booking(
            id=data.get("id") or str(uuid.uuid4()),
            car_id=data["car_id"],
            customer_email=data["customer_email"],
            customer_name=data.get("customer_name"),
            start_date=as_utc(data["start_date"]),
            end_date=as_utc(data["end_date"]),
            booking_status=data.get("booking_status") or "pending",
            created_at=utcnow(),
        )
        self.session.add(booking)
        await self.session.flush()
        return booking

    async def find_by_customer_email(self, email: str) -> list[Booking]:
        result = await self.session.execute(
            select(Booking).where(Booking.customer_email == email).order_by(Booking.created_at, Booking.id)
        )
        return list(result.scalars().all())

    async def set_fields(self, booking_id: str, values: dict[str, Any]) -> UpdateResult:
        """Overwrite ``values``; ``modified_count`` is 0 when they already held."""
        booking = await self.session.get(Booking, booking_id)
        if booking is None:
            return UpdateResult(matched_count=0, modified_count=0)

        modified = 0
        for column, value in values.items():
            value = _stored(column, value)
            if _stored(column, getattr(booking, column)) != value:
                setattr(booking, column, value)
                modified = 1
        await self.session.flush()
        return UpdateResult(matched_count=1, modified_count=modified)
