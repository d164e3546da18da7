"""CLI entry point for immigration news."""

import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

from immigration_news.adapters.output import MarkdownNewsFormatter
from immigration_news.config import get_settings
from immigration_news.core import filter_news
from immigration_news.use_cases import NewsIngestionPipeline


def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of markdown"),
    category: str = typer.Option("all", "--category", help="Only this category"),
    search: str = typer.Option("", "--search", help="Text to look for in title or summary"),
    country: str = typer.Option("all", "--country", help="Only this country"),
    urgent_only: bool = typer.Option(False, "--urgent-only", help="Only urgent items"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write result to file"),
) -> None:
    """Fetch the latest immigration and visa news."""
    text = asyncio.run(async_run(config, as_json, category, search, country, urgent_only))

    if output is None:
        typer.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.echo(f"News saved to {output}", err=True)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(
    config: Path,
    as_json: bool,
    category: str,
    search: str,
    country: str,
    urgent_only: bool,
) -> str:
    """Async implementation of the fetch command."""
    settings = get_settings(config)

    pipeline = NewsIngestionPipeline(settings.pipeline)
    news = await pipeline.fetch_news()

    news = filter_news(news, search=search, category=category, country=country)
    if urgent_only:
        news = [item for item in news if item.urgent]

    if as_json or settings.output.format == "json":
        return json.dumps([item.to_dict() for item in news], indent=2, ensure_ascii=False)

    formatter = MarkdownNewsFormatter(settings.output_title)
    return formatter.render(news, datetime.now(timezone.utc))


if __name__ == "__main__":
    app()
