"""Identity infrastructure layer."""

from cinetheque.infrastructure.identity.dependencies import (
    get_current_principal,
    require_authority,
    security_chain,
)

__all__ = [
    "get_current_principal",
    "require_authority",
    "security_chain",
]
