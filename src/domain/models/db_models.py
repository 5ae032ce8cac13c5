from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime, timezone


def _utc_now():
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # pymongo hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Quiz(BaseModel):
    """A quiz authored by a user. `id` is assigned by the store on insert."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, alias="_id")
    title: str
    description: Optional[str] = None
    text: Optional[str] = None
    notes: Optional[str] = None
    # Server-authoritative fields
    created_date: datetime = Field(default_factory=_utc_now)
    last_modified_date: datetime = Field(default_factory=_utc_now)
    user_id: str

    @field_validator("created_date", "last_modified_date")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def to_dict(self):
        """Convert model to dictionary for MongoDB."""
        return self.model_dump(by_alias=True)


class User(BaseModel):
    """An author account. Only looked up by name from this service."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    user_name: str
    email: str = ""
    display_name: str = ""
    created_at: datetime = Field(default_factory=_utc_now)

    def to_dict(self):
        """Convert model to dictionary for MongoDB."""
        return self.model_dump(by_alias=True)
