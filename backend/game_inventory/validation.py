"""
Game Inventory — Form Validation Layer
=======================================

What:  Turns a raw form mapping into sanitized values plus either a typed
       form or an ordered list of field errors.
How:   Every expected field is read (missing ones count as empty), trimmed
       and escaped for redisplay. The same raw values are then run through
       the pydantic form model, whose validators collect all failures.
Who:   Called by ConsoleService and GameService before any write.

Pure: no I/O, no logging, same output for the same input.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from game_inventory.sanitize import sanitize
from game_inventory.schemas.console import ConsoleForm
from game_inventory.schemas.game import GameForm

FormT = TypeVar("FormT", bound=BaseModel)

CONSOLE_FIELDS = ("name", "description")
GAME_FIELDS = ("name", "description", "console", "price", "number_in_stock")


@dataclass(frozen=True)
class FieldError:
    """One failed rule: which form field, and the message to show next to it."""
    field: str
    message: str


@dataclass
class FormResult(Generic[FormT]):
    """
    Outcome of validating one submitted form.

    Attributes:
        values: Sanitized value for every expected field, pass or fail.
        errors: Field errors in form order; empty when the form is valid.
        form:   The typed form when valid, otherwise None.
    """
    values: Dict[str, str]
    errors: List[FieldError] = field(default_factory=list)
    form: Optional[FormT] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _raw_fields(raw: Mapping[str, Any], fields: Sequence[str]) -> Dict[str, str]:
    return {name: str(raw.get(name) or "") for name in fields}


def validate_form(
    model: Type[FormT], raw: Mapping[str, Any], fields: Sequence[str]
) -> FormResult[FormT]:
    """Validate `raw` against `model`, collecting every field error."""
    values = _raw_fields(raw, fields)
    sanitized = {name: sanitize(value) for name, value in values.items()}

    try:
        form = model.model_validate(values)
    except ValidationError as exc:
        errors = [
            FieldError(
                field=str(err["loc"][0]) if err["loc"] else "",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return FormResult(values=sanitized, errors=errors)

    return FormResult(values=sanitized, form=form)


def validate_console(raw: Mapping[str, Any]) -> FormResult[ConsoleForm]:
    """Console rules: name at least 3 characters, description non-empty."""
    return validate_form(ConsoleForm, raw, CONSOLE_FIELDS)


def validate_game(raw: Mapping[str, Any]) -> FormResult[GameForm]:
    """Game rules: name and description non-empty, console id, numeric price and stock."""
    return validate_form(GameForm, raw, GAME_FIELDS)
