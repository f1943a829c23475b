"""Data models for cities and the geography dataset."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class CityEntry:
    """One selectable city.

    Equality is structural over every field, so two cities sharing a name
    in different states or countries stay distinct.
    """

    country: str
    state: str
    city: str
    timezone: str
    latitude: float
    longitude: float

    @property
    def location(self) -> str:
        """City name, or the state name for entries without one."""
        return self.city or self.state


Catalog = Dict[str, CityEntry]


class _Record(BaseModel):
    """Base for dataset records; unknown keys (ids, iso codes...) are ignored."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def _none_name(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class CityRecord(_Record):
    """City as it appears in the dataset."""

    name: str
    timezone: str
    latitude: float
    longitude: float


class StateRecord(_Record):
    """State (or region) holding cities."""

    name: str
    cities: List[CityRecord] = Field(default_factory=list)

    @field_validator("cities", mode="before")
    @classmethod
    def _none_cities(cls, value):
        return [] if value is None else value


class CountryRecord(_Record):
    """Top-level country record."""

    name: str
    states: List[StateRecord] = Field(default_factory=list)

    @field_validator("states", mode="before")
    @classmethod
    def _none_states(cls, value):
        return [] if value is None else value
