"""Application settings with Pydantic validation and TOML/env var support."""

import os
import tomllib
from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Quantity configuration loaded from env vars, TOML, or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="QUANTITY_",
    )

    CONFIG_PATH: ClassVar[Path] = (
        Path.home() / ".config" / "quantity" / "config.toml"
    )

    # Default widths for the CLI (-1 means the formatter's own default)
    amount_width: int = Field(default=5, ge=-1, le=64)
    bytes_width: int = Field(default=6, ge=-1, le=64)
    rate_width: int = Field(default=8, ge=-1, le=64)

    # Width-fixity check
    check_width: int = Field(default=5, ge=-1, le=64)
    check_limit: int = Field(
        default=2**32,
        ge=0,
        description="Check every amount below this",
    )
    check_workers: int = Field(
        default_factory=lambda: os.cpu_count() or 1,
        ge=1,
        description="Number of interleaved stripes",
    )
    check_batch: int = Field(
        default=10000,
        ge=1,
        description="Amounts per stripe between progress updates",
    )

    @classmethod
    def _load_toml_settings(cls) -> dict:
        """Load config TOML and normalize nested sections."""
        if not cls.CONFIG_PATH.exists():
            return {}

        with cls.CONFIG_PATH.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            return {}

        flat_keys = set(cls.model_fields)
        normalized = {
            k: v
            for k, v in data.items()
            if k in flat_keys and not isinstance(v, dict)
        }

        widths = data.get("widths")
        if isinstance(widths, dict):
            for key in ("amount", "bytes", "rate"):
                if key in widths:
                    normalized[f"{key}_width"] = widths[key]

        check = data.get("check")
        if isinstance(check, dict):
            for key in ("width", "limit", "workers", "batch"):
                if key in check:
                    normalized[f"check_{key}"] = check[key]

        return normalized

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, **kwargs
    ):
        """Load from init kwargs, then env vars, then TOML file."""
        from pydantic_settings import EnvSettingsSource

        init_settings = kwargs.get("init_settings")
        env_settings = kwargs.get("env_settings")
        sources = []
        if init_settings:
            sources.append(init_settings)
        if env_settings:
            sources.append(env_settings)
        else:
            sources.append(EnvSettingsSource(settings_cls))

        sources.append(cls._load_toml_settings)

        return tuple(sources)
