"""Application entry point for the PR README generator."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .aggregate import aggregate_pull_requests, rank_repositories
from .config import Config, load_config
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    DataValidationError,
)
from .github_client import GitHubClient
from .models import PullRequestRecord
from .records import load_pull_requests_from_file
from .render import (
    count_open_pull_requests,
    generate_contributions_section,
    insert_contributions_section,
    substitute_open_pr_count,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_AUTHENTICATION_ERROR = 3
EXIT_API_ERROR = 4
EXIT_DATA_VALIDATION_ERROR = 5


def read_template(path: Path) -> str:
    """Read the README template.

    Raises:
        ConfigurationError: If the template file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not read README template '{path}': {exc}") from exc


def fetch_pull_requests(config: Config, github_client: GitHubClient) -> List[PullRequestRecord]:
    """Return the pull request history from the data file when configured, else from the search API."""
    if config.pr_data_file is not None:
        print(f"Loading pull requests from '{config.pr_data_file}'...")
        return load_pull_requests_from_file(config.pr_data_file)

    print(f"Fetching pull requests authored by '{config.author}'...")
    return github_client.search_pull_requests(config.author)


def render_readme(config: Config, template: str, github_client: GitHubClient) -> str:
    """Run fetch, group, sort and render, returning the final README text."""
    prs = fetch_pull_requests(config, github_client)

    result = aggregate_pull_requests(prs, github_client.get_stargazers_count)
    ranked = rank_repositories(result.repositories)
    print(
        f"Found {len(prs)} pull requests across {len(ranked)} repositories "
        f"({result.open_pr_count} open)."
    )

    readme = substitute_open_pr_count(template, count_open_pull_requests(prs))
    if config.include_gallery:
        section = generate_contributions_section(ranked, config.author)
        readme = insert_contributions_section(readme, section)

    return readme


def orchestrate_readme_generation() -> int:
    """Run the README generation workflow and return a process exit code.

    Returns:
        ``0`` on success, otherwise a non-zero code per failure category.
        Nothing is written to the output path unless every stage succeeded.
    """
    try:
        config = load_config()
        template = read_template(config.template_path)

        github_client = GitHubClient(config=config)
        readme = render_readme(config, template, github_client)

        config.output_path.write_text(readme, encoding="utf-8")
        print(f"Wrote '{config.output_path}'.")
        return EXIT_SUCCESS
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION_ERROR
    except AuthenticationError as exc:
        logger.error("Authentication error: %s", exc)
        return EXIT_AUTHENTICATION_ERROR
    except ApiError as exc:
        logger.error("GitHub API error: %s", exc)
        return EXIT_API_ERROR
    except DataValidationError as exc:
        logger.error("Data validation error: %s", exc)
        return EXIT_DATA_VALIDATION_ERROR
    except Exception:
        logger.exception("Unexpected error during README generation")
        return EXIT_UNEXPECTED_ERROR


def main() -> None:
    """Console script entry point."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    raise SystemExit(orchestrate_readme_generation())
