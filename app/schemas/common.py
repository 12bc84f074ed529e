from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

from app.utils.dates import as_utc

# SQLite hands back naive values; everything stored is UTC.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case input is accepted too."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class Person(CamelModel):
    email: str
    name: str | None = None


class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_id: str | None = None


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int
