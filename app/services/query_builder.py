"""Translate ``/all-cars`` query parameters into a SQL query over cars."""
from dataclasses import dataclass, field

from sqlalchemy import ColumnElement, Select, or_

from app.models.car import Car

SORT_ORDERS = {
    "asc": Car.price.asc(),
    "dsc": Car.price.desc(),
}

SEARCH_FIELDS = (Car.brand, Car.model, Car.location)


@dataclass
class CarQuery:
    predicate: ColumnElement[bool] | None = None
    order_by: list = field(default_factory=list)
    limit: int | None = None

    def apply(self, stmt: Select) -> Select:
        if self.predicate is not None:
            stmt = stmt.where(self.predicate)
        # Insertion order breaks ties so identical queries return identical pages.
        stmt = stmt.order_by(*self.order_by, Car.created_at.asc(), Car.id.asc())
        if self.limit is not None:
            stmt = stmt.limit(self.limit)
        return stmt


def parse_limit(raw: str | int | None) -> int | None:
    """Return a positive cap, or None when the value means "no cap"."""
    if raw is None:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def search_predicate(term: str | None) -> ColumnElement[bool] | None:
    if not term:
        return None
    return or_(*(column.icontains(term, autoescape=True) for column in SEARCH_FIELDS))


def build_car_query(
    sort: str | None = None,
    search: str | None = None,
    limit: str | int | None = None,
) -> CarQuery:
    order = SORT_ORDERS.get(sort) if sort else None
    return CarQuery(
        predicate=search_predicate(search),
        order_by=[order] if order is not None else [],
        limit=parse_limit(limit),
    )
