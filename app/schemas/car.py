from app.schemas.common import CamelModel, Person, UtcDatetime


class CarCreate(CamelModel):
    owner: Person
    brand: str
    model: str
    price: float
    location: str
    description: str | None = None
    image: str | None = None
    availability: str | None = None
    created_at: UtcDatetime | None = None

    def to_columns(self, exclude_unset: bool = False) -> dict:
        """Flatten to column names; with ``exclude_unset`` only keys the client sent are kept."""
        data = self.model_dump(exclude={"owner"}, exclude_unset=exclude_unset)
        data["owner_email"] = self.owner.email
        if not exclude_unset or "name" in self.owner.model_fields_set:
            data["owner_name"] = self.owner.name
        return data


class CarUpdate(CarCreate):
    """Listing document used by the upsert route."""


class CarResponse(CamelModel):
    id: str
    owner: Person
    brand: str
    model: str
    price: float
    location: str
    description: str | None = None
    image: str | None = None
    availability: str | None = None
    created_at: UtcDatetime
    booking_count: int

    model_config = {"from_attributes": True}
