"""Commit identity model."""

from pydantic import BaseModel, Field

DEFAULT_NAME = "John Doe"
DEFAULT_EMAIL = "john.doe@mail.com"


class Identity(BaseModel):
    """Author/committer identity written into every rewritten commit."""

    name: str = ""
    email: str = ""

    class Config:
        frozen = True

    @property
    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.email.strip())

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class IdentityOverrides(BaseModel):
    """Optional command line values that take precedence over a document."""

    name: str | None = Field(default=None, description="Override display name")
    email: str | None = Field(default=None, description="Override email address")

    def apply(self, identity: Identity) -> Identity:
        return Identity(
            name=self.name or identity.name,
            email=self.email or identity.email,
        )
