from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortAttribute(StrEnum):
    ID = "id"
    SUBJECT = "subject"
    LOCATION = "location"
    PRICE = "price"
    SPACES = "spaces"
    DESCRIPTION = "description"
    IMAGE = "image"


class SubmissionStatus(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    RESETTING_CAPACITIES = "resetting_capacities"
    REFETCHING_CATALOG = "refetching_catalog"
    SUCCESS = "success"
    FAILED = "failed"


IN_FLIGHT_STATUSES = frozenset(
    {
        SubmissionStatus.SUBMITTING,
        SubmissionStatus.RESETTING_CAPACITIES,
        SubmissionStatus.REFETCHING_CATALOG,
    }
)


class Activity(BaseModel):
    """A bookable lesson slot. ``spaces`` is the remaining capacity."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(alias="_id")
    subject: str
    location: str
    price: float = Field(ge=0)
    spaces: int = Field(ge=0)
    description: str = ""
    image: Optional[str] = None
