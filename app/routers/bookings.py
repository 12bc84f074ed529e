from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import require_path_owner
from app.schemas.booking import BookingCreate, BookingDatesUpdate, BookingResponse, BookingStatusUpdate
from app.schemas.common import InsertResult, UpdateResult
from app.services.booking_service import BookingService

router = APIRouter(tags=["bookings"])


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(db)


@router.post("/add-booking", response_model=InsertResult)
async def add_booking(payload: BookingCreate, service: BookingService = Depends(get_booking_service)):
    booking = await service.create_booking(payload.to_columns())
    return InsertResult(inserted_id=booking.id)


@router.get("/bookings/{email}", response_model=list[BookingResponse], dependencies=[Depends(require_path_owner)])
async def my_bookings(email: str, service: BookingService = Depends(get_booking_service)):
    bookings = await service.list_by_customer_email(email)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.patch("/booking-status/{booking_id}", response_model=UpdateResult)
async def update_booking_status(
    booking_id: str,
    payload: BookingStatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    return await service.update_status(booking_id, payload.booking_status)


@router.patch("/booking-dates/{booking_id}", response_model=UpdateResult)
async def update_booking_dates(
    booking_id: str,
    payload: BookingDatesUpdate,
    service: BookingService = Depends(get_booking_service),
):
    return await service.update_dates(booking_id, payload.start_date, payload.end_date)
