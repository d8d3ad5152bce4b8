"""Validation of raw pull request payloads into ``PullRequestRecord`` instances."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .errors import ConfigurationError, DataValidationError
from .models import PR_STATE_CLOSED, PR_STATE_OPEN, PullRequestRecord

logger = logging.getLogger(__name__)

_VALID_STATES = (PR_STATE_OPEN, PR_STATE_CLOSED)


def _validate_state(state: Any, payload: Dict[str, Any]) -> str:
    if state not in _VALID_STATES:
        raise DataValidationError(
            f"Pull request payload has invalid state {state!r}: payload={payload}"
        )
    return str(state)


def _validate_repository_url(repository_url: Any, payload: Dict[str, Any]) -> str:
    if not isinstance(repository_url, str) or not repository_url:
        raise DataValidationError(
            f"Pull request payload is missing a repository URL: payload={payload}"
        )
    return repository_url


def parse_search_item(item: Dict[str, Any]) -> PullRequestRecord:
    """Build a ``PullRequestRecord`` from one GitHub issue search result.

    A search result is only a pull request when it carries a ``pull_request``
    object. Its nullable ``merged_at`` timestamp decides whether the pull
    request was merged.

    Raises:
        DataValidationError: If required fields are missing or invalid.
    """
    if not isinstance(item, dict):
        raise DataValidationError(f"Search result is not an object: {item!r}")

    pull_request = item.get("pull_request")
    if not isinstance(pull_request, dict):
        raise DataValidationError(
            f"Search result is not a pull request: payload={item}"
        )

    return PullRequestRecord(
        state=_validate_state(item.get("state"), item),
        is_merged=pull_request.get("merged_at") is not None,
        repository_url=_validate_repository_url(item.get("repository_url"), item),
    )


def parse_recorded_item(item: Dict[str, Any]) -> PullRequestRecord:
    """Build a ``PullRequestRecord`` from a previously recorded ``{state, isMerged, repo_url}`` entry."""
    if not isinstance(item, dict):
        raise DataValidationError(f"Recorded pull request is not an object: {item!r}")

    is_merged = item.get("isMerged")
    if not isinstance(is_merged, bool):
        raise DataValidationError(
            f"Recorded pull request has invalid 'isMerged' value: payload={item}"
        )

    return PullRequestRecord(
        state=_validate_state(item.get("state"), item),
        is_merged=is_merged,
        repository_url=_validate_repository_url(item.get("repo_url"), item),
    )


def load_pull_requests_from_file(path: Path) -> List[PullRequestRecord]:
    """Load pull request records from a local JSON file instead of the search API.

    Raises:
        ConfigurationError: If the file does not exist or cannot be read.
        DataValidationError: If the file is not a JSON array of valid records.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not read pull request data file '{path}': {exc}") from exc

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise DataValidationError(f"Pull request data file '{path}' is not valid JSON.") from exc

    if not isinstance(payload, list):
        raise DataValidationError(
            f"Pull request data file '{path}' must contain a JSON array of records."
        )

    records = [parse_recorded_item(item) for item in payload]
    logger.debug("Loaded recorded pull requests", extra={"path": str(path), "count": len(records)})
    return records
