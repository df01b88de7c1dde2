from dataclasses import dataclass, field

from cinetheque.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Principal(ValueObject):
    """The authenticated caller of a request."""

    subject: str
    name: str | None = None
    email: str | None = None
    authorities: frozenset[str] = field(default_factory=frozenset)

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities
