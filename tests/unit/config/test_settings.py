"""Tests for application settings."""

import pytest

from rewit.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.config_file == "rewit.yml"
        assert settings.token_envar == "GITHUB_TOKEN"
        assert settings.ssh_host == "github.com"
        assert settings.github_api_url == "https://api.github.com"
        assert settings.rewriter == "filter-branch"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("REWIT_TOKEN_ENVAR", "GH_PAT")
        monkeypatch.setenv("REWIT_SSH_HOST", "ghe.example.com")
        monkeypatch.setenv("REWIT_PER_PAGE", "50")
        settings = Settings()
        assert settings.token_envar == "GH_PAT"
        assert settings.ssh_host == "ghe.example.com"
        assert settings.per_page == 50

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("REWIT_CONFIG_FILE=repos.yml\n")
        assert Settings().config_file == "repos.yml"
