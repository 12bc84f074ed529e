from sqlalchemy import Column, DateTime, String

from app.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True)
    # Plain reference, bookings may outlive or predate the car they name.
    car_id = Column(String, nullable=False, index=True)
    customer_email = Column(String, nullable=False, index=True)
    customer_name = Column(String, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    booking_status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False)

    @property
    def customer(self) -> dict:
        return {"email": self.customer_email, "name": self.customer_name}
