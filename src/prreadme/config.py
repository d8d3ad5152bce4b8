"""Configuration loading and validation for the PR README generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import AuthenticationError, ConfigurationError

DEFAULT_AUTHOR = "guilhas07"
DEFAULT_TEMPLATE_PATH = "template.md"
DEFAULT_OUTPUT_PATH = "README.md"
DEFAULT_API_URL = "https://api.github.com"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by the README generator."""

    token: Optional[str]
    author: str
    template_path: Path
    output_path: Path
    api_url: str = DEFAULT_API_URL
    include_gallery: bool = False
    pr_data_file: Optional[Path] = None


def _parse_bool(name: str, value: str) -> bool:
    """Parse a boolean flag from an environment variable value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean literal.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid value for '{name}': expected true or false, got '{value}'.")


def load_config() -> Config:
    """Build and validate application configuration from the environment.

    Variables from a local ``.env`` file are loaded first without overriding
    values already present in the process environment.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If a setting has an invalid value.
        AuthenticationError: If ``AUTH_TOKEN`` is not configured and pull
            requests have to be fetched from the API.
    """
    load_dotenv()

    author = os.getenv("PR_AUTHOR", DEFAULT_AUTHOR).strip()
    if not author:
        raise ConfigurationError("Invalid value for 'PR_AUTHOR': expected a GitHub login.")

    api_url = os.getenv("GITHUB_API_URL", DEFAULT_API_URL).strip().rstrip("/")
    if not api_url:
        raise ConfigurationError("Invalid value for 'GITHUB_API_URL': expected a URL.")

    data_file_value = os.getenv("PR_DATA_FILE", "").strip()
    pr_data_file = Path(data_file_value) if data_file_value else None

    token: Optional[str] = os.getenv("AUTH_TOKEN", "").strip() or None
    if token is None and pr_data_file is None:
        raise AuthenticationError(
            "Missing required GitHub access token. "
            "Set the 'AUTH_TOKEN' environment variable before running the README generator."
        )

    return Config(
        token=token,
        author=author,
        template_path=Path(os.getenv("TEMPLATE_PATH", DEFAULT_TEMPLATE_PATH)),
        output_path=Path(os.getenv("OUTPUT_PATH", DEFAULT_OUTPUT_PATH)),
        api_url=api_url,
        include_gallery=_parse_bool(
            "CONTRIBUTIONS_GALLERY", os.getenv("CONTRIBUTIONS_GALLERY", "false")
        ),
        pr_data_file=pr_data_file,
    )
