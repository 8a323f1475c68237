"""Shared test fixtures."""

import pytest

from quantity.config.settings import Settings


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep the user's config file and environment out of tests."""
    monkeypatch.setattr(Settings, "CONFIG_PATH", tmp_path / "missing.toml")
    for key in Settings.model_fields:
        monkeypatch.delenv(f"QUANTITY_{key.upper()}", raising=False)


@pytest.fixture
def settings() -> Settings:
    """Settings with a small check range for testing."""
    return Settings(
        check_limit=20_000,
        check_workers=2,
        check_batch=1000,
    )
