"""Repository settings models.

GramSettings is the unit of comparison: the desired settings are
parsed from the settings file, the actual settings are built from
GitHub API responses. Every field is optional. A field that is
None has not been specified and is never diffed.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from gram.models.github import Branch, Repository


class Options(BaseModel):
    """Settings under a repository's Settings -> Options section.

    Each toggle is independently optional: None means "not specified",
    which is distinct from False. Only TOML booleans are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    allow_squash_merge: StrictBool | None = Field(default=None, alias="allow-squash-merge")
    allow_merge_commit: StrictBool | None = Field(default=None, alias="allow-merge-commit")
    allow_rebase_merge: StrictBool | None = Field(default=None, alias="allow-rebase-merge")
    delete_branch_on_merge: StrictBool | None = Field(default=None, alias="delete-branch-on-merge")


class GramSettings(BaseModel):
    """Repository settings that gram is able to see.

    Any settings that are not defined here are ignored by all
    gram commands.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str | None = None
    options: Options | None = None
    protected_branches: list[str] | None = Field(default=None, alias="protected")

    @classmethod
    def from_github(cls, repository: Repository, branches: Sequence[Branch]) -> "GramSettings":
        """Build the actual settings from GitHub API responses.

        Options are always populated. An empty branch list gives
        protected_branches=None so it compares the same as an
        unspecified list.
        """
        names = [branch.name for branch in branches]
        return cls(
            description=repository.description,
            options=Options(
                allow_squash_merge=repository.allow_squash_merge,
                allow_merge_commit=repository.allow_merge_commit,
                allow_rebase_merge=repository.allow_rebase_merge,
                delete_branch_on_merge=repository.delete_branch_on_merge,
            ),
            protected_branches=names or None,
        )
