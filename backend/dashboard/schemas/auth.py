"""Credential Schemas — shape of the login form.

Invariants:
    - email must look like local@domain.tld (deliverability is not checked)
    - password is at least 6 characters
"""

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
