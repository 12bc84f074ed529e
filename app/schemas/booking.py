from pydantic import Field

from app.schemas.common import CamelModel, Person, UtcDatetime


class BookingCreate(CamelModel):
    car_id: str = Field(alias="carID")
    customer: Person
    start_date: UtcDatetime
    end_date: UtcDatetime
    booking_status: str = "pending"

    def to_columns(self) -> dict:
        data = self.model_dump(exclude={"customer"})
        data["customer_email"] = self.customer.email
        data["customer_name"] = self.customer.name
        return data


class BookingStatusUpdate(CamelModel):
    booking_status: str


class BookingDatesUpdate(CamelModel):
    start_date: UtcDatetime
    end_date: UtcDatetime


class BookingResponse(CamelModel):
    id: str
    car_id: str = Field(alias="carID")
    customer: Person
    start_date: UtcDatetime
    end_date: UtcDatetime
    booking_status: str
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
