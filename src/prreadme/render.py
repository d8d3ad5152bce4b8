"""Rendering helpers for the README badge and contribution gallery.

This module provides utilities for:
- Substituting the open pull request count into a template placeholder.
- Building a gallery of repository pin cards for merged contributions.
- Inserting the gallery at a marker, or at the end of the document.
"""

from __future__ import annotations

from typing import Iterable, List

from .models import PullRequestRecord, RepositorySummary

OPEN_PRS_PLACEHOLDER = "${OPEN_PRS}"
CONTRIBUTIONS_MARKER = "<!-- CONTRIBUTIONS -->"

_SECTION_HEADER = """
### 🚀 Open Source Contributions

<p align="center">"""

_SECTION_FOOTER = """
</p>"""

_GALLERY_ENTRY = """
    <a href="https://github.com/{owner}/{name}/pulls?q=is%3Apr+author%3A{author}" target="_blank">
        <img width=300 height=150 src="https://github-readme-stats.vercel.app/api/pin/?username={owner}&repo={name}&theme=radical&show_owner=true" />
    </a>"""


def count_open_pull_requests(prs: Iterable[PullRequestRecord]) -> int:
    """Count pull requests whose state is open, regardless of merge status."""
    return sum(1 for pr in prs if pr.is_open)


def substitute_open_pr_count(
    document: str,
    open_pr_count: int,
    placeholder: str = OPEN_PRS_PLACEHOLDER,
) -> str:
    """Replace the first occurrence of ``placeholder`` with the decimal count.

    A document without the placeholder is returned unchanged.
    """
    return document.replace(placeholder, str(open_pr_count), 1)


def generate_contributions_section(ranked: List[RepositorySummary], author: str) -> str:
    """Build the contribution gallery markup.

    ``ranked`` is expected in ascending popularity order; entries are emitted
    from the most to the least popular repository. Repositories without a
    merged pull request are skipped.

    Args:
        ranked: Repository summaries sorted ascending by popularity.
        author: GitHub login used in the per-repository pull request links.

    Returns:
        Markdown/HTML fragment with one linked pin card per repository.
    """
    parts = [_SECTION_HEADER]
    for summary in reversed(ranked):
        if not summary.has_merged_pull_request:
            continue
        parts.append(_GALLERY_ENTRY.format(owner=summary.owner, name=summary.name, author=author))
    parts.append(_SECTION_FOOTER)
    return "".join(parts)


def insert_contributions_section(
    document: str,
    section: str,
    marker: str = CONTRIBUTIONS_MARKER,
) -> str:
    """Replace the first ``marker`` with ``section``, or append it when absent."""
    if marker in document:
        return document.replace(marker, section, 1)
    return document + section
