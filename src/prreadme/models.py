"""Domain models for pull request aggregation and README rendering.

These dataclasses model only the subset of GitHub API payload fields that are
needed to group contributions by repository.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

PR_STATE_OPEN = "open"
PR_STATE_CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class PullRequestRecord:
    """Represents one pull request authored by the configured user."""

    state: str
    is_merged: bool
    repository_url: str

    @property
    def is_open(self) -> bool:
        return self.state == PR_STATE_OPEN

    @property
    def is_abandoned(self) -> bool:
        """True for pull requests that were closed without being merged."""
        return self.state == PR_STATE_CLOSED and not self.is_merged


@dataclass(slots=True)
class RepositorySummary:
    """Represents all counted pull requests targeting one repository."""

    owner: str
    name: str
    popularity: int
    pull_requests: List[PullRequestRecord] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def has_merged_pull_request(self) -> bool:
        return any(pr.is_merged for pr in self.pull_requests)


@dataclass(slots=True)
class AggregationResult:
    """Repository summaries in first-seen order plus the open pull request total."""

    repositories: List[RepositorySummary]
    open_pr_count: int
