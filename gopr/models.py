"""
Shapes of the GitHub API responses that ``go-pr`` consumes

Only the fields used by the program are required; everything else in a
response is ignored.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PullRequestLink(Record):
    url: str


class PullRequestIssue(Record):
    """
    A pull request as returned by the issue search endpoint.  GitHub treats
    pull requests as issues; the full pull request lives at
    ``pull_request.url``.
    """

    pull_request: PullRequestLink
    number: int | None = None
    title: str | None = None
    html_url: str | None = None


class SearchResults(Record):
    items: list[PullRequestIssue]
    total_count: int | None = None
    incomplete_results: bool | None = None


class Branch(Record):
    ref: str


class PullRequest(Record):
    html_url: str
    head: Branch
    number: int | None = None
    title: str | None = None

    def __str__(self) -> str:
        if self.number is not None:
            return f"#{self.number} ({self.head.ref})"
        else:
            return f"{self.html_url} ({self.head.ref})"
