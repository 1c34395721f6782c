"""
Invites module data models.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class InviteRequest(BaseModel):
    """Body of the invite-member function."""

    team_id: str = Field(..., min_length=1)
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class InviteResult(BaseModel):
    message: str = "Member invited successfully."
