from sqlalchemy import Column, DateTime, Float, Integer, String

from app.database import Base


class Car(Base):
    __tablename__ = "cars"

    id = Column(String, primary_key=True)
    owner_email = Column(String, nullable=False, index=True)
    owner_name = Column(String, nullable=True)
    brand = Column(String, nullable=False)
    model = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    location = Column(String, nullable=False)
    description = Column(String, nullable=True)
    image = Column(String, nullable=True)
    availability = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    booking_count = Column(Integer, nullable=False, default=0)

    @property
    def owner(self) -> dict:
        return {"email": self.owner_email, "name": self.owner_name}
