"""Tests for environment helper utilities."""

from pathlib import Path

import pytest

from utils import env


@pytest.fixture(autouse=True)
def _clear_dev_mode_cache():
    env.is_dev_mode.cache_clear()
    yield
    env.is_dev_mode.cache_clear()


class TestIsDevMode:
    """Tests for is_dev_mode function."""

    def test_returns_false_when_no_env_vars(self, monkeypatch):
        monkeypatch.delenv("PROCTOR_ENV", raising=False)
        monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)

        assert env.is_dev_mode() is False

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes"])
    def test_returns_true_for_dev_values_proctor_env(self, monkeypatch, value):
        monkeypatch.setenv("PROCTOR_ENV", value)
        monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)

        assert env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["dev", "1", "true"])
    def test_returns_true_for_dev_values_proctor_dev_mode(self, monkeypatch, value):
        monkeypatch.delenv("PROCTOR_ENV", raising=False)
        monkeypatch.setenv("PROCTOR_DEV_MODE", value)

        assert env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["DEV", "Development", "TRUE", "Yes"])
    def test_case_insensitive(self, monkeypatch, value):
        monkeypatch.setenv("PROCTOR_ENV", value)
        monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)

        assert env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["prod", "production", "0", "false", "no", "staging"])
    def test_returns_false_for_non_dev_values(self, monkeypatch, value):
        monkeypatch.setenv("PROCTOR_ENV", value)
        monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)

        assert env.is_dev_mode() is False

    def test_proctor_env_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("PROCTOR_ENV", "dev")
        monkeypatch.setenv("PROCTOR_DEV_MODE", "false")

        assert env.is_dev_mode() is True

    def test_handles_whitespace(self, monkeypatch):
        monkeypatch.setenv("PROCTOR_ENV", "  dev  ")
        monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)

        assert env.is_dev_mode() is True

    def test_result_is_cached(self, monkeypatch):
        monkeypatch.setenv("PROCTOR_ENV", "dev")
        assert env.is_dev_mode() is True

        monkeypatch.setenv("PROCTOR_ENV", "prod")
        assert env.is_dev_mode() is True


class TestGetDataDir:
    def test_default_is_home_dot_dir(self, monkeypatch):
        monkeypatch.delenv("PROCTOR_DATA_DIR", raising=False)
        assert env.get_data_dir() == Path.home() / ".proctorLab"

    def test_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROCTOR_DATA_DIR", str(tmp_path))
        assert env.get_data_dir() == tmp_path

    def test_blank_override_ignored(self, monkeypatch):
        monkeypatch.setenv("PROCTOR_DATA_DIR", "   ")
        assert env.get_data_dir() == Path.home() / ".proctorLab"
