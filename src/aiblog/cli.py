"""CLI entrypoints for the blog."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from aiblog.config import load_settings
from aiblog.errors import PostNotFoundError
from aiblog.logging import configure_logging, get_logger
from aiblog.models.outline import HeadingLevel
from aiblog.outline.extractor import OutlineExtractor
from aiblog.site import Site

app = typer.Typer(add_completion=False, help="AI-assisted-blog site tools")
logger = get_logger(__name__)


@app.command()
def outline(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Rendered HTML file"),
    selector: str | None = typer.Option(
        None,
        "--selector",
        "-s",
        help="CSS selector of the content region (overrides AIBLOG_CONTENT_SELECTOR)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the outline as JSON"),
    write: bool = typer.Option(False, "--write", help="Write assigned anchor ids back into FILE"),
) -> None:
    """Print the "On This Page" outline of a rendered HTML file."""

    settings = load_settings()
    configure_logging(settings.log_level)

    extractor = OutlineExtractor(selector or settings.content_selector, dedupe=settings.dedupe_anchors)
    result, annotated = extractor.extract_html(file.read_text(encoding="utf-8"), document_id=file.name)

    if write:
        file.write_text(annotated, encoding="utf-8")
        logger.info("Wrote anchors to %s", file)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return
    if result.is_empty:
        typer.echo("No headings found.", err=True)
        return
    for entry in result.entries:
        indent = "  " if entry.level is HeadingLevel.SUBSECTION else ""
        typer.echo(f"{indent}{entry.text}  #{entry.id}")


@app.command()
def posts(
    content_dir: Path | None = typer.Option(
        None,
        "--content-dir",
        help="Content directory (overrides AIBLOG_CONTENT_DIR)",
    ),
) -> None:
    """List posts with their slug, date and title."""

    settings = load_settings()
    if content_dir is not None:
        settings.content_dir = content_dir
    configure_logging(settings.log_level)

    for post in Site(settings).library.posts():
        typer.echo(f"{post.slug}\t{post.meta.date or '-'}\t{post.title}")


@app.command()
def render(
    slug: str = typer.Argument(..., help="Slug of the post to render"),
    output: Path = typer.Option(Path("post.html"), "--output", "-o", help="Output HTML file"),
    theme: str | None = typer.Option(None, "--theme", help="light, dark or system"),
    content_dir: Path | None = typer.Option(
        None,
        "--content-dir",
        help="Content directory (overrides AIBLOG_CONTENT_DIR)",
    ),
) -> None:
    """Render a single post page with its outline panel."""

    settings = load_settings()
    if content_dir is not None:
        settings.content_dir = content_dir
    configure_logging(settings.log_level)

    site = Site(settings)
    try:
        page = site.render_article(slug, site.theme(theme))
    except PostNotFoundError as e:
        raise typer.BadParameter(str(e), param_hint="SLUG") from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page, encoding="utf-8")
    typer.echo(str(output))


if __name__ == "__main__":
    app()
