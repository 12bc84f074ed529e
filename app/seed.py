import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.car import Car
from app.repositories.cars import CarRepository

DEMO_OWNER = {"owner_email": "demo@carcloud.dev", "owner_name": "CarCloud Demo"}

SEED_CARS = [
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "car-corolla-001")), "brand": "Toyota", "model": "Corolla", "price": 45.0, "location": "Dhaka", "created_at": "2026-01-01T09:00:00+00:00"},
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "car-civic-001")), "brand": "Honda", "model": "Civic", "price": 50.0, "location": "Austin", "created_at": "2026-01-02T09:00:00+00:00"},
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "car-model3-001")), "brand": "Tesla", "model": "Model 3", "price": 90.0, "location": "San Francisco", "created_at": "2026-01-03T09:00:00+00:00"},
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "car-golf-001")), "brand": "Volkswagen", "model": "Golf", "price": 40.0, "location": "Berlin", "created_at": "2026-01-04T09:00:00+00:00"},
]


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Car).limit(1))
    if result.scalars().first() is not None:
        return

    cars = CarRepository(session)
    for car in SEED_CARS:
        await cars.insert({**DEMO_OWNER, **car})

    await session.commit()
