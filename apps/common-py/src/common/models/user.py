"""User models for the Users HTTP triggers."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User payload accepted by CreateUser."""

    name: str | None = Field(None, alias="Name", description="Full name of the user")
    email: str | None = Field(None, alias="Email", description="Email address of the user")

    # Input matches the wire names only, case-sensitively
    model_config = ConfigDict(
        validate_by_alias=True,
        validate_by_name=False,
        extra="ignore",
        json_schema_extra={
            "example": {
                "Name": "Jane Doe",
                "Email": "jane.doe@example.com",
            }
        },
    )


class UserSummary(BaseModel):
    """User record returned by GetUser."""

    id: int = Field(..., alias="Id", description="Identifier of the user")
    name: str = Field(..., alias="Name", description="Full name of the user")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"Id": 1, "Name": "John"}},
    )
