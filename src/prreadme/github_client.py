"""GitHub REST API client for pull request history and repository metadata."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_API_URL, Config
from .errors import ApiError, AuthenticationError, DataValidationError
from .models import PullRequestRecord
from .records import parse_search_item

logger = logging.getLogger(__name__)


class GitHubClient:
    """Small, typed client for the GitHub search and repository APIs."""

    _API_VERSION = "2022-11-28"
    _SEARCH_PAGE_SIZE = 100
    _SEARCH_RESULT_LIMIT = 1000

    def __init__(self, config: Config, timeout_seconds: int = 30) -> None:
        """Initialize a GitHub API client.

        Args:
            config: Validated runtime configuration including the API URL and token.
            timeout_seconds: Per-request timeout in seconds.
        """
        self._config = config
        self._timeout_seconds = timeout_seconds
        self._base_url = (config.api_url or DEFAULT_API_URL).rstrip("/")

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": self._API_VERSION,
            }
        )
        if config.token:
            self._session.headers["Authorization"] = f"Bearer {config.token}"

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below the API root."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute a single GET request and return the decoded JSON object.

        Raises:
            AuthenticationError: If GitHub rejects the credentials (HTTP 401/403).
            ApiError: If the request fails, returns HTTP >= 400, or does not
                return a JSON object.
        """
        url = self._build_url(path)
        logger.debug("GitHub API request", extra={"url": url, "params": params})

        try:
            response = self._session.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise ApiError(f"GitHub request failed: GET {url}") from exc

        status_code = response.status_code
        if status_code in (401, 403):
            raise AuthenticationError(
                f"GitHub rejected the request: GET {url} returned {status_code} - {response.text}"
            )

        if status_code >= 400:
            raise ApiError(f"GitHub API request failed: GET {url} returned {status_code} - {response.text}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError(f"GitHub API returned invalid JSON: GET {url}") from exc

        if not isinstance(payload, dict):
            raise ApiError(f"GitHub API returned unexpected payload shape: GET {url}")

        return payload

    def search_pull_requests(self, author: str) -> List[PullRequestRecord]:
        """List every pull request authored by ``author`` across GitHub.

        Uses the issue search endpoint with page-number pagination. Paging stops
        at the first partial page, once ``total_count`` records were read, or at
        the search API window of ``_SEARCH_RESULT_LIMIT`` results.
        """
        pull_requests: List[PullRequestRecord] = []
        page = 1

        while True:
            payload = self._get_json(
                "search/issues",
                params={
                    "q": f"is:pr author:{author}",
                    "per_page": self._SEARCH_PAGE_SIZE,
                    "page": page,
                },
            )

            page_items = payload.get("items")
            if not isinstance(page_items, list):
                raise ApiError(f"GitHub search response is missing 'items': page={page}")

            pull_requests.extend(parse_search_item(item) for item in page_items)

            total_count = payload.get("total_count")
            if len(page_items) < self._SEARCH_PAGE_SIZE:
                break
            if isinstance(total_count, int) and len(pull_requests) >= total_count:
                break
            if page * self._SEARCH_PAGE_SIZE >= self._SEARCH_RESULT_LIMIT:
                logger.info(
                    "Search result window exhausted",
                    extra={"author": author, "total_count": total_count, "fetched": len(pull_requests)},
                )
                break

            page += 1

        return pull_requests

    def get_stargazers_count(self, owner: str, name: str) -> int:
        """Return the stargazers count of ``owner/name``.

        Raises:
            DataValidationError: If the repository payload has no valid count.
        """
        payload = self._get_json(f"repos/{owner}/{name}")
        stars = payload.get("stargazers_count")

        if isinstance(stars, bool) or not isinstance(stars, int) or stars < 0:
            raise DataValidationError(
                f"Repository payload has invalid 'stargazers_count': repo={owner}/{name}, value={stars!r}"
            )

        return stars
