"""User schemas for API request/response models.

Fields are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hexuser.domain.user import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(_CamelModel):
    """Response schema for a single user."""

    id: int = Field(..., description="User ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "John",
                "lastName": "Doe",
                "email": "john@example.com",
            },
        },
    )

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class UserUpdateRequest(_CamelModel):
    """Request schema for replacing a user's mutable fields.

    All fields are required; the update overwrites all three.
    """

    first_name: str = Field(..., description="New first name")
    last_name: str = Field(..., description="New last name")
    email: str = Field(..., description="New email address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "JohnUpdated",
                "lastName": "DoeUpdated",
                "email": "john.updated@example.com",
            },
        },
    )

    def to_domain(self) -> User:
        return User.create(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )
