"""
Game Inventory — Console Records and Form
==========================================

What:  Pydantic models for console data leaving the store (records) and
       console data entering it (the validated form).
Why:   Handlers work with explicit typed records instead of ORM rows, so the
       in-memory store used in tests and the SQL store return the same shape.
"""

import uuid

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_core import PydanticCustomError

from game_inventory.sanitize import sanitize


class ConsoleRecord(BaseModel):
    """
    A persisted console.

    `url` is the canonical reference path, derived from the id on read and
    used for links and post-write redirects.
    """
    id: uuid.UUID = Field(description="Store-assigned identifier")
    name: str = Field(description="Display name, at least 3 characters")
    description: str = Field(description="Free-text description")

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return f"/console/{self.id}"


class ConsoleForm(BaseModel):
    """
    Validated console form fields, ready to persist.

    Each validator trims, checks its rule against the trimmed text, then
    returns the escaped value. Pydantic runs every field validator before
    raising, so one bad field never hides another.
    """
    name: str
    description: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise PydanticCustomError(
                "name_too_short",
                "Console name must contain at least 3 characters",
            )
        return sanitize(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError(
                "description_empty", "Description must not be empty"
            )
        return sanitize(v)
