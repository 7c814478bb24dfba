"""
Game Inventory — Game Records and Form
=======================================

What:  Pydantic models for game data leaving the store (full records and
       the name/description summary used on console pages) and the
       validated game form.
"""

import math
import re
import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_core import PydanticCustomError

from game_inventory.sanitize import sanitize
from game_inventory.schemas.console import ConsoleRecord

# What an HTML number input submits: ASCII digits, optional sign and fraction.
# float() alone would also take "1_000", "1e3", "inf" and non-ASCII digits.
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def _parse_number(value: Any) -> Optional[float]:
    """Parse a submitted decimal, or None when it is not one."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value) if math.isfinite(value) else None
    text = str(value).strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    return float(text)


class GameSummary(BaseModel):
    """
    Projection of a game for console detail and delete pages.

    Only what those pages list: the name, the description and a link.
    """
    id: uuid.UUID
    name: str
    description: str

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return f"/game/{self.id}"


class GameRecord(BaseModel):
    """
    A persisted game.

    `console` is populated when the store joined the referenced console
    (list, detail and delete pages); it is None for bare reads.
    """
    id: uuid.UUID = Field(description="Store-assigned identifier")
    name: str
    description: str
    console_id: uuid.UUID = Field(description="Identifier of the owning console")
    price: float = Field(ge=0)
    number_in_stock: int = Field(ge=0)
    console: Optional[ConsoleRecord] = None

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return f"/game/{self.id}"


class GameForm(BaseModel):
    """
    Validated game form fields, ready to persist.

    The console reference only has to be a well-formed identifier here;
    whether that console exists is enforced by the store's foreign key.
    Submitted under the form field name `console`.
    """
    name: str
    description: str
    console_id: uuid.UUID = Field(alias="console")
    price: float
    number_in_stock: int

    model_config = {"populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError("name_empty", "Name must not be empty")
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

    @field_validator("console_id", mode="before")
    @classmethod
    def validate_console(cls, v: Any) -> uuid.UUID:
        if isinstance(v, uuid.UUID):
            return v
        try:
            return uuid.UUID(str(v).strip())
        except ValueError:
            raise PydanticCustomError("console_missing", "Console must be selected")

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v: Any) -> float:
        price = _parse_number(v)
        if price is None:
            raise PydanticCustomError("price_not_numeric", "Price must be a number")
        if price < 0:
            raise PydanticCustomError("price_negative", "Price must not be negative")
        return price

    @field_validator("number_in_stock", mode="before")
    @classmethod
    def validate_number_in_stock(cls, v: Any) -> int:
        count = _parse_number(v)
        if count is None:
            raise PydanticCustomError(
                "stock_not_numeric", "Number in stock must be a number"
            )
        if count < 0:
            raise PydanticCustomError(
                "stock_negative", "Number in stock must not be negative"
            )
        # "5.0" is a whole number, "5.5" is not
        if not count.is_integer():
            raise PydanticCustomError(
                "stock_not_whole", "Number in stock must be a whole number"
            )
        return int(count)
