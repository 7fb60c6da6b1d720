"""Configuration document model."""

from pydantic import AliasChoices, BaseModel, Field

from rewit.core.exceptions import ValidationError
from rewit.core.models.identity import Identity, IdentityOverrides


class RewitConfig(BaseModel):
    """The persisted document shared by discovery and rewrite modes.

    ``repos`` is accepted under the older ``bundles`` key as well.
    """

    user: Identity = Field(default_factory=Identity)
    repos: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("repos", "bundles"),
    )

    class Config:
        frozen = True

    def with_overrides(self, name: str | None = None, email: str | None = None) -> "RewitConfig":
        """Return a copy whose identity uses the given values where set."""
        overrides = IdentityOverrides(name=name, email=email)
        return RewitConfig(user=overrides.apply(self.user), repos=list(self.repos))

    def validate_for_rewrite(self) -> None:
        """Reject documents that cannot drive a rewrite run."""
        missing = []
        if not self.user.name.strip():
            missing.append("user.name")
        if not self.user.email.strip():
            missing.append("user.email")
        if not self.repos:
            missing.append("repos")
        if missing:
            raise ValidationError(
                "You must provide a name and an email in the input file, "
                "and at least one repository URL",
                details={"missing": missing},
            )

    def to_document(self) -> dict:
        return {
            "user": {"name": self.user.name, "email": self.user.email},
            "repos": list(self.repos),
        }
