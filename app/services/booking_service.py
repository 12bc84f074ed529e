"""Booking workflows spanning the bookings and cars tables."""
import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import begin_write
from app.models.booking import Booking
from app.repositories.bookings import BookingRepository
from app.repositories.cars import CarRepository
from app.schemas.common import UpdateResult

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.bookings = BookingRepository(session)
        self.cars = CarRepository(session)

    async def create_booking(self, data: dict) -> Booking:
        """Store a booking and bump its car's counter in one transaction.

        Either both writes commit or neither does. A car id that matches no
        listing is not an error since bookings carry a plain reference.
        """
        try:
            await begin_write(self.session)
            booking = await self.bookings.insert(data)
            counted = await self.cars.increment_booking_count(booking.car_id, 1)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if counted.matched_count == 0:
            logger.warning("Booking %s references unknown car %s", booking.id, booking.car_id)
        logger.info("Created booking %s for car %s", booking.id, booking.car_id)
        return booking

    async def update_status(self, booking_id: str, status: str) -> UpdateResult:
        await begin_write(self.session)
        result = await self.bookings.set_fields(booking_id, {"booking_status": status})
        await self.session.commit()
        return result

    async def update_dates(self, booking_id: str, start_date: datetime, end_date: datetime) -> UpdateResult:
        await begin_write(self.session)
        result = await self.bookings.set_fields(
            booking_id, {"start_date": start_date, "end_date": end_date}
        )
        await self.session.commit()
        return result

    async def list_by_customer_email(self, email: str) -> list[Booking]:
        return await self.bookings.find_by_customer_email(email)
