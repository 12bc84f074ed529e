from app.models.car import Car
from app.models.booking import Booking

__all__ = ["Car", "Booking"]
