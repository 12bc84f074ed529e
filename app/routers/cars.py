from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db, get_write_db
from app.dependencies import require_path_owner
from app.models.car import Car
from app.repositories.cars import CarRepository
from app.schemas.car import CarCreate, CarResponse, CarUpdate
from app.schemas.common import DeleteResult, InsertResult, UpdateResult
from app.services.query_builder import build_car_query

router = APIRouter(tags=["cars"])


def _serialize(cars: list[Car]) -> list[CarResponse]:
    return [CarResponse.model_validate(c) for c in cars]


@router.post("/add-car", response_model=InsertResult)
async def add_car(payload: CarCreate, db: AsyncSession = Depends(get_write_db)):
    car_id = await CarRepository(db).insert(payload.to_columns())
    await db.commit()
    return InsertResult(inserted_id=car_id)


@router.get("/latest-cars", response_model=list[CarResponse])
async def latest_cars(db: AsyncSession = Depends(get_db)):
    cars = await CarRepository(db).find_latest(settings.latest_cars_limit)
    return _serialize(cars)


@router.get("/my-cars/{email}", response_model=list[CarResponse], dependencies=[Depends(require_path_owner)])
async def my_cars(email: str, db: AsyncSession = Depends(get_db)):
    cars = await CarRepository(db).find_by_owner_email(email)
    return _serialize(cars)


@router.get("/car/{car_id}", response_model=CarResponse | None)
async def get_car(car_id: str, db: AsyncSession = Depends(get_db)):
    car = await CarRepository(db).find_by_id(car_id)
    return CarResponse.model_validate(car) if car is not None else None


@router.get("/all-cars", response_model=list[CarResponse])
async def all_cars(
    sort: str | None = None,
    search: str | None = None,
    limit: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    query = build_car_query(sort=sort, search=search, limit=limit)
    cars = await CarRepository(db).find_all(query)
    return _serialize(cars)


@router.put("/update/{car_id}", response_model=UpdateResult)
async def update_car(car_id: str, payload: CarUpdate, db: AsyncSession = Depends(get_write_db)):
    result = await CarRepository(db).replace_or_create(car_id, payload.to_columns(exclude_unset=True))
    await db.commit()
    return result


@router.delete("/car/{car_id}", response_model=DeleteResult)
async def delete_car(car_id: str, db: AsyncSession = Depends(get_write_db)):
    result = await CarRepository(db).delete(car_id)
    await db.commit()
    return result
