"""Pydantic schemas for the authentication endpoints."""

from pydantic import BaseModel, Field

from cinetheque.domain.identity.principal import Principal


class SessionResponse(BaseModel):
    """Session issued at the end of the OAuth2 flow."""

    access_token: str = Field(..., description="Signed session token")
    token_type: str = Field("bearer", description="Always 'bearer'")
    expires_in: int = Field(..., description="Lifetime in seconds")


class PrincipalResponse(BaseModel):
    """The authenticated caller."""

    subject: str
    name: str | None = None
    email: str | None = None
    authorities: list[str] = Field(default_factory=list)

    @classmethod
    def from_principal(cls, principal: Principal) -> "PrincipalResponse":
        return cls(
            subject=principal.subject,
            name=principal.name,
            email=principal.email,
            authorities=sorted(principal.authorities),
        )
