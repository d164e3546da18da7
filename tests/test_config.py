"""Tests for configuration loading."""

from pathlib import Path

import pytest

from immigration_news.config import PipelineConfig, Settings, get_settings, load_config


def test_defaults() -> None:
    """Test defaults match the observed pipeline behaviour."""
    settings = Settings()

    assert settings.max_items == 30
    assert settings.pipeline.item_cap_per_query == 20
    assert settings.request_timeout == 10.0
    assert len(settings.feed_queries) == 3
    assert settings.proxy_endpoints[0] == "https://api.allorigins.win/raw?url="
    assert settings.pipeline.country == "USA"
    assert settings.output_title == "Immigration News & Updates"


def test_default_lists_are_independent() -> None:
    """Test each config gets its own lists."""
    first = PipelineConfig()
    second = PipelineConfig()

    first.feed_queries.append("extra")

    assert "extra" not in second.feed_queries


def test_missing_file(tmp_path: Path) -> None:
    """Test a missing YAML file gives defaults."""
    assert load_config(tmp_path / "absent.yaml") == {}
    assert get_settings(tmp_path / "absent.yaml").max_items == 30


def test_yaml_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test YAML sections override defaults key by key."""
    monkeypatch.delenv("IMMIGRATION_NEWS_TIMEOUT", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "pipeline:\n"
        "  max_items: 10\n"
        "  feed_queries:\n"
        "    - asylum news\n"
        "output:\n"
        "  format: json\n",
        encoding="utf-8",
    )

    settings = get_settings(config_path)

    assert settings.max_items == 10
    assert settings.feed_queries == ["asylum news"]
    assert settings.pipeline.item_cap_per_query == 20
    assert settings.output.format == "json"


def test_unknown_key_rejected(tmp_path: Path) -> None:
    """Test typos in config are reported."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("pipeline:\n  max_itemz: 10\n", encoding="utf-8")

    with pytest.raises(ValueError, match="pipeline.max_itemz"):
        get_settings(config_path)


def test_empty_yaml(tmp_path: Path) -> None:
    """Test an empty file is accepted."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert get_settings(config_path).max_items == 30


def test_env_timeout(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test environment overrides the request timeout."""
    monkeypatch.setenv("IMMIGRATION_NEWS_TIMEOUT", "3.5")

    settings = get_settings(tmp_path / "absent.yaml")

    assert settings.request_timeout == 3.5


def test_output_format_validated(tmp_path: Path) -> None:
    """Test a misspelled output format is reported."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output:\n  format: jsn\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown output format 'jsn'"):
        get_settings(config_path)


def test_output_format_json_accepted(tmp_path: Path) -> None:
    """Test both supported formats load."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output:\n  format: json\n", encoding="utf-8")

    assert get_settings(config_path).output.format == "json"
