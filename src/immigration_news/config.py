"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass
class PipelineConfig:
    """News ingestion settings."""
    feed_queries: list[str] = field(default_factory=lambda: [
        "visa H1B student visa work visa USA",
        "immigration green card USCIS USA",
        "OPT F1 visa international students USA",
    ])
    proxy_endpoints: list[str] = field(default_factory=lambda: [
        "https://api.allorigins.win/raw?url=",
        "https://corsproxy.io/?",
        "https://api.codetabs.com/v1/proxy?quest=",
    ])
    max_items: int = 30
    item_cap_per_query: int = 20
    min_body_length: int = 200
    request_timeout: float = 10.0
    summary_length: int = 200
    country: str = "USA"
    default_source: str = "Google News"
    search_base_url: str = "https://news.google.com/rss/search"
    search_params: dict = field(default_factory=lambda: {
        "hl": "en-US",
        "gl": "US",
        "ceid": "US:en",
    })


OUTPUT_FORMATS = ("markdown", "json")


@dataclass
class OutputConfig:
    """CLI output settings."""
    format: str = "markdown"
    title: str = "Immigration News & Updates"


@dataclass
class Settings:
    """Application settings."""

    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def feed_queries(self) -> list[str]:
        return self.pipeline.feed_queries

    @property
    def proxy_endpoints(self) -> list[str]:
        return self.pipeline.proxy_endpoints

    @property
    def max_items(self) -> int:
        return self.pipeline.max_items

    @property
    def request_timeout(self) -> float:
        return self.pipeline.request_timeout

    @property
    def output_title(self) -> str:
        return self.output.title


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _apply_section(target: Any, section: str, values: dict) -> None:
    """Copy YAML values onto a config dataclass, rejecting unknown keys."""
    known = {f.name for f in fields(target)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"Unknown config key '{section}.{key}'")
        setattr(target, key, value)


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings()

    if "pipeline" in config:
        _apply_section(settings.pipeline, "pipeline", config["pipeline"] or {})

    if "output" in config:
        _apply_section(settings.output, "output", config["output"] or {})

    if settings.output.format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{settings.output.format}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )

    # Environment wins over YAML
    timeout = os.getenv("IMMIGRATION_NEWS_TIMEOUT")
    if timeout:
        settings.pipeline.request_timeout = float(timeout)

    return settings
