from dataclasses import dataclass
from datetime import date

from cinetheque.domain.common.exceptions import ValidationError
from cinetheque.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Person(ValueObject):
    """Name and birth date shared by every person of the catalogue."""

    first_name: str
    last_name: str
    birth_date: date | None = None

    def __post_init__(self) -> None:
        if not self.first_name or not self.first_name.strip():
            raise ValidationError("First name cannot be empty", field="first_name")
        if not self.last_name or not self.last_name.strip():
            raise ValidationError("Last name cannot be empty", field="last_name")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
