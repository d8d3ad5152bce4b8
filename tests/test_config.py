"""Tests for environment-based configuration loading."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from prreadme.config import DEFAULT_API_URL, DEFAULT_AUTHOR, load_config
from prreadme.errors import AuthenticationError, ConfigurationError

_ENV_KEYS = (
    "AUTH_TOKEN",
    "PR_AUTHOR",
    "TEMPLATE_PATH",
    "OUTPUT_PATH",
    "GITHUB_API_URL",
    "CONTRIBUTIONS_GALLERY",
    "PR_DATA_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    with patch("prreadme.config.load_dotenv") as load_dotenv_mock:
        yield load_dotenv_mock


def test_load_config_defaults(monkeypatch, clean_env):
    """Verify defaults are applied when only the token is configured."""
    monkeypatch.setenv("AUTH_TOKEN", "  secret  ")

    config = load_config()

    clean_env.assert_called_once_with()
    assert config.token == "secret"
    assert config.author == DEFAULT_AUTHOR
    assert config.template_path == Path("template.md")
    assert config.output_path == Path("README.md")
    assert config.api_url == DEFAULT_API_URL
    assert config.include_gallery is False
    assert config.pr_data_file is None


def test_load_config_reads_overrides(monkeypatch):
    """Verify every setting can be overridden from the environment."""
    monkeypatch.setenv("AUTH_TOKEN", "secret")
    monkeypatch.setenv("PR_AUTHOR", "octocat")
    monkeypatch.setenv("TEMPLATE_PATH", "docs/template.md")
    monkeypatch.setenv("OUTPUT_PATH", "out/README.md")
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3/")
    monkeypatch.setenv("CONTRIBUTIONS_GALLERY", "Yes")
    monkeypatch.setenv("PR_DATA_FILE", "prs.json")

    config = load_config()

    assert config.author == "octocat"
    assert config.template_path == Path("docs/template.md")
    assert config.output_path == Path("out/README.md")
    assert config.api_url == "https://github.example.com/api/v3"
    assert config.include_gallery is True
    assert config.pr_data_file == Path("prs.json")


def test_load_config_missing_token_raises_authentication_error():
    """Verify a missing AUTH_TOKEN raises AuthenticationError."""
    with pytest.raises(AuthenticationError):
        load_config()


def test_load_config_blank_token_raises_authentication_error(monkeypatch):
    """Verify a whitespace-only AUTH_TOKEN is treated as missing."""
    monkeypatch.setenv("AUTH_TOKEN", "   ")

    with pytest.raises(AuthenticationError):
        load_config()


def test_load_config_data_file_without_token_is_allowed(monkeypatch):
    """Verify recorded pull request data can be used without a token."""
    monkeypatch.setenv("PR_DATA_FILE", "prs.json")

    config = load_config()

    assert config.token is None
    assert config.pr_data_file == Path("prs.json")


def test_load_config_invalid_gallery_flag_raises_configuration_error(monkeypatch):
    """Verify unrecognized boolean values raise ConfigurationError."""
    monkeypatch.setenv("AUTH_TOKEN", "secret")
    monkeypatch.setenv("CONTRIBUTIONS_GALLERY", "maybe")

    with pytest.raises(ConfigurationError):
        load_config()


def test_load_config_blank_author_raises_configuration_error(monkeypatch):
    """Verify an empty PR_AUTHOR raises ConfigurationError."""
    monkeypatch.setenv("AUTH_TOKEN", "secret")
    monkeypatch.setenv("PR_AUTHOR", "  ")

    with pytest.raises(ConfigurationError):
        load_config()
