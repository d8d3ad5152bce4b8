"""Grouping and ranking of pull requests by target repository.

This module turns a flat pull request history into repository summaries:
- repository API URLs are parsed into ``(owner, name)`` keys
- closed-but-unmerged pull requests are dropped before grouping
- each distinct repository is looked up once for its stargazers count
- summaries are ranked ascending by that popularity metric
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, List, Tuple

from .errors import DataValidationError, RepositoryReferenceError
from .models import AggregationResult, PullRequestRecord, RepositorySummary

logger = logging.getLogger(__name__)

StarLookup = Callable[[str, str], int]

_REPOSITORY_URL_PATTERN = re.compile(
    r"^https?://[^/]+(?:/[^/]+)*?/repos/(?P<owner>[^/?#]+)/(?P<name>[^/?#]+)"
)


def parse_repository_reference(repository_url: str) -> Tuple[str, str]:
    """Extract ``(owner, name)`` from a repository API URL.

    Accepts ``https://api.github.com/repos/<owner>/<name>`` as well as GitHub
    Enterprise URLs with a path prefix such as ``/api/v3``.

    Raises:
        RepositoryReferenceError: If the URL does not match the expected pattern.
    """
    match = _REPOSITORY_URL_PATTERN.match(repository_url)
    if match is None:
        raise RepositoryReferenceError(f"Couldn't parse repository URL: {repository_url}")

    return match.group("owner"), match.group("name")


def aggregate_pull_requests(
    prs: Iterable[PullRequestRecord],
    star_lookup: StarLookup,
) -> AggregationResult:
    """Group pull requests by target repository.

    Business logic, applied per record in input order:
    - Parse the repository reference; a malformed URL aborts aggregation.
    - Discard pull requests that were closed without being merged.
    - Count open pull requests.
    - Append to the existing summary for ``(owner, name)``, or create one and
      resolve its popularity with a single ``star_lookup`` call.

    Returns summaries in first-seen order together with the open pull request
    total.
    """
    summaries: Dict[Tuple[str, str], RepositorySummary] = {}
    repositories: List[RepositorySummary] = []
    open_pr_count = 0
    discarded = 0

    for pr in prs:
        owner, name = parse_repository_reference(pr.repository_url)

        if pr.is_abandoned:
            discarded += 1
            continue

        if pr.is_open:
            open_pr_count += 1

        summary = summaries.get((owner, name))
        if summary is None:
            popularity = star_lookup(owner, name)
            if popularity < 0:
                raise DataValidationError(
                    f"Popularity lookup returned a negative value for {owner}/{name}: {popularity}"
                )
            summary = RepositorySummary(owner=owner, name=name, popularity=popularity)
            summaries[(owner, name)] = summary
            repositories.append(summary)

        summary.pull_requests.append(pr)

    logger.info(
        "Aggregated pull requests",
        extra={
            "repositories": len(repositories),
            "open_prs": open_pr_count,
            "discarded_prs": discarded,
        },
    )

    return AggregationResult(repositories=repositories, open_pr_count=open_pr_count)


def rank_repositories(repositories: Iterable[RepositorySummary]) -> List[RepositorySummary]:
    """Return repositories sorted ascending by popularity; ties keep their input order."""
    return sorted(repositories, key=lambda summary: summary.popularity)
