import pytest

from app.repositories.cars import CarRepository
from app.services.query_builder import build_car_query, parse_limit


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("", None), ("0", None), ("-3", None), ("abc", None), ("2.5", None), ("4", 4), (7, 7)],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


def test_no_parameters_matches_everything():
    query = build_car_query()
    assert query.predicate is None
    assert query.order_by == []
    assert query.limit is None


def test_unknown_sort_is_natural_order():
    assert build_car_query(sort="price").order_by == []
    assert build_car_query(sort="ASC").order_by == []


async def _seed(repo: CarRepository, rows: list[dict]) -> list[str]:
    ids = []
    for i, row in enumerate(rows):
        data = {
            "owner_email": "owner@example.com",
            "brand": "Generic",
            "model": "Base",
            "location": "Nowhere",
            "price": 10,
            "created_at": f"2026-01-01T00:00:0{i}+00:00",
        }
        data.update(row)
        ids.append(await repo.insert(data))
    await repo.session.commit()
    return ids


@pytest.mark.asyncio
async def test_sort_dsc_orders_by_price_descending(db_session):
    repo = CarRepository(db_session)
    await _seed(repo, [{"price": 10}, {"price": 30}, {"price": 20}])

    cars = await repo.find_all(build_car_query(sort="dsc"))
    assert [c.price for c in cars] == [30, 20, 10]


@pytest.mark.asyncio
async def test_sort_asc_orders_by_price_ascending(db_session):
    repo = CarRepository(db_session)
    await _seed(repo, [{"price": 10}, {"price": 30}, {"price": 20}, {"price": 20}])

    cars = await repo.find_all(build_car_query(sort="asc"))
    assert [c.price for c in cars] == [10, 20, 20, 30]


@pytest.mark.asyncio
async def test_natural_order_is_stable(db_session):
    repo = CarRepository(db_session)
    ids = await _seed(repo, [{"price": 10}, {"price": 30}, {"price": 20}])

    first = [c.id for c in await repo.find_all(build_car_query(sort="bogus"))]
    second = [c.id for c in await repo.find_all(build_car_query(sort="bogus"))]
    assert first == second == ids


@pytest.mark.asyncio
async def test_search_is_case_insensitive_or_across_fields(db_session):
    repo = CarRepository(db_session)
    corolla, civic, by_brand, by_location = await _seed(
        repo,
        [
            {"brand": "Generic", "model": "toyota corolla"},
            {"brand": "Honda", "model": "Civic", "location": "Austin"},
            {"brand": "TOYOTA", "model": "Hilux"},
            {"brand": "Ford", "model": "Focus", "location": "Toyota City"},
        ],
    )

    found = {c.id for c in await repo.find_all(build_car_query(search="Toyota"))}
    assert found == {corolla, by_brand, by_location}
    assert civic not in found


@pytest.mark.asyncio
async def test_search_term_is_matched_literally(db_session):
    repo = CarRepository(db_session)
    plain, percent = await _seed(repo, [{"model": "Model 3"}, {"model": "100% electric"}])

    found = [c.id for c in await repo.find_all(build_car_query(search="0%"))]
    assert found == [percent]
    assert [c.id for c in await repo.find_all(build_car_query(search="_"))] == []


@pytest.mark.asyncio
async def test_limit_caps_results_after_filter_and_sort(db_session):
    repo = CarRepository(db_session)
    await _seed(
        repo,
        [
            {"brand": "Kia", "price": 5},
            {"brand": "Kia", "price": 50},
            {"brand": "Mini", "price": 99},
            {"brand": "Kia", "price": 25},
        ],
    )

    cars = await repo.find_all(build_car_query(sort="dsc", search="kia", limit="2"))
    assert [c.price for c in cars] == [50, 25]


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", ["0", "-1", "lots", None])
async def test_non_positive_or_invalid_limit_returns_everything(db_session, limit):
    repo = CarRepository(db_session)
    await _seed(repo, [{"price": 1}, {"price": 2}, {"price": 3}])

    cars = await repo.find_all(build_car_query(limit=limit))
    assert len(cars) == 3


@pytest.mark.asyncio
async def test_search_folds_non_ascii_case(db_session):
    repo = CarRepository(db_session)
    skoda, _ = await _seed(
        repo,
        [
            {"brand": "Škoda", "model": "Octavia", "location": "München"},
            {"brand": "Seat", "model": "Ibiza", "location": "Madrid"},
        ],
    )

    assert [c.id for c in await repo.find_all(build_car_query(search="MÜNCHEN"))] == [skoda]
    assert [c.id for c in await repo.find_all(build_car_query(search="škoda"))] == [skoda]
