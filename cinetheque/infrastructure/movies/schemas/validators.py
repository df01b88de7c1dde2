"""Field helpers shared by the record schemas.

Messages raised here end up verbatim in the ``errors`` array of a 400
problem detail as ``"<field>: <message>"``.
"""

from datetime import date, datetime

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from cinetheque.domain.common.entity import MAX_ID

BIRTH_DATE_FORMAT = "%d/%m/%Y"
RELEASE_DATE_FORMAT = "%d/%m/%Y:%H:%M"

# Records are immutable, camelCase on the wire and snake_case in Python
RECORD_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


def require_not_blank(value: object) -> object:
    """Reject missing, null and whitespace-only strings."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("must not be blank")
    return value


def require_int_column(value: int | None) -> int | None:
    """Reject integers the INTEGER columns cannot store."""
    if value is not None and abs(value) > MAX_ID:
        raise ValueError(f"must be at most {MAX_ID} in absolute value")
    return value


def parse_birth_date(value: object) -> object:
    """Accept ``dd/MM/yyyy`` strings; other inputs go to the default date parser."""
    if isinstance(value, str) and value:
        try:
            return datetime.strptime(value, BIRTH_DATE_FORMAT).date()
        except ValueError:
            raise ValueError("must match the format dd/MM/yyyy") from None
    return value


def parse_release_date(value: object) -> object:
    """Accept ``dd/MM/yyyy:HH:mm`` strings; other inputs go to the default parser."""
    if isinstance(value, str) and value:
        try:
            return datetime.strptime(value, RELEASE_DATE_FORMAT)
        except ValueError:
            raise ValueError("must match the format dd/MM/yyyy:HH:mm") from None
    return value


def format_birth_date(value: date | None) -> str | None:
    return value.strftime(BIRTH_DATE_FORMAT) if value else None


def format_release_date(value: datetime | None) -> str | None:
    return value.strftime(RELEASE_DATE_FORMAT) if value else None
