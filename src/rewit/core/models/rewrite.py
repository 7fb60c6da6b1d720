"""Rewrite run result models."""

from pydantic import BaseModel, Field


class RewriteFailure(BaseModel):
    """A repository that could not be rewritten."""

    target: str
    stage: str
    message: str


class RewriteSummary(BaseModel):
    """Outcome of processing every target of a configuration document."""

    succeeded: list[str] = Field(default_factory=list)
    failed: list[RewriteFailure] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed
