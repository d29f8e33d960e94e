"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field rules are enforced by the domain validator, not here, so that a bad
submission comes back as a field -> message mapping.
"""

from pydantic import BaseModel, ConfigDict, Field

from kitchensink.domain.model import Member


class MemberRequest(BaseModel):
    """
    Request model for member registration.

    Only the wire name phoneNumber is read; any submitted id is ignored.
    """

    name: str | None = Field(default=None, description="Full name (1-25 characters, no digits)")
    email: str | None = Field(default=None, description="Unique email address")
    phone_number: str | None = Field(
        default=None,
        alias="phoneNumber",
        description="Phone number (10-12 digits)",
    )

    def to_domain(self) -> Member:
        return Member(name=self.name, email=self.email, phone_number=self.phone_number)


class MemberResponse(BaseModel):
    """Response model for a registered member."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    phone_number: str = Field(alias="phoneNumber")

    @classmethod
    def from_domain(cls, member: Member) -> "MemberResponse":
        return cls(
            id=member.id,
            name=member.name,
            email=member.email,
            phone_number=member.phone_number,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
