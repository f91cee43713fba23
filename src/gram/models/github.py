"""GitHub API response models.

Only the fields gram reads are declared; anything else in the
response body is ignored.
"""

from pydantic import BaseModel, Field


class Repository(BaseModel):
    """Response of GET /repos/{owner}/{repo}.

    The merge options are required. GitHub omits them for tokens
    without admin access; such a body is rejected, not read as false.
    """

    description: str | None = None
    allow_squash_merge: bool
    allow_merge_commit: bool
    allow_rebase_merge: bool
    delete_branch_on_merge: bool


class RequiredStatusChecks(BaseModel):
    """Status checks required before merging into a branch."""

    contexts: list[str] = Field(default_factory=list)


class Protection(BaseModel):
    """Branch protection summary returned with each branch."""

    enabled: bool = False
    required_status_checks: RequiredStatusChecks = Field(default_factory=RequiredStatusChecks)


class Branch(BaseModel):
    """Entry of GET /repos/{owner}/{repo}/branches."""

    name: str
    protection: Protection = Field(default_factory=Protection)
