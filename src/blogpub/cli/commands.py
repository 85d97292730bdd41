"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from blogpub.config import Settings, load_config
from blogpub.core.parse import load_records
from blogpub.core.pipeline import run_build


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def build_cmd(
    blog_dir: Annotated[Optional[str], typer.Argument(help="Directory containing source documents")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (defaults to the blog directory)")] = None,
    ext: Annotated[Optional[str], typer.Option("--ext", help="Source file extension, e.g. .md")] = None,
    limit: Annotated[Optional[int], typer.Option("--excerpt-limit", help="Max excerpt length in characters")] = None,
    templates: Annotated[Optional[str], typer.Option("--template-dir", help="Directory overriding bundled templates")] = None,
    ):
    """Render every document to HTML and write the listing page."""
    settings = _settings(overrides={
        "blog_dir": blog_dir, "output_dir": out, "extension": ext,
        "excerpt_limit": limit, "template_dir": templates,
    })
    template_dir = Path(settings.template_dir) if settings.template_dir else None

    try:
        records, written = run_build(
            Path(settings.blog_dir), settings.target_dir, settings.extension,
            settings.excerpt_limit, template_dir,
        )
    except RuntimeError as e:
        _fail(str(e))
    except Exception as e:
        _fail("Build failed", e)

    if not records:
        typer.echo(f"No {settings.extension} documents found in {settings.blog_dir}.")
        raise typer.Exit(0)

    for record in records:
        typer.echo(f"  {record.slug} -> {record.output_path}")
    typer.echo(f"Built {len(records)} document(s) to {settings.target_dir}/ ({len(written)} file(s) written)")


def list_cmd(
    blog_dir: Annotated[Optional[str], typer.Argument(help="Directory containing source documents")] = None,
    ext: Annotated[Optional[str], typer.Option("--ext", help="Source file extension, e.g. .md")] = None,
    ):
    """List documents newest first without writing any files."""
    settings = _settings(overrides={"blog_dir": blog_dir, "extension": ext})
    try:
        records = load_records(Path(settings.blog_dir), settings.extension, settings.target_dir,
                               settings.excerpt_limit)
    except RuntimeError as e:
        _fail(str(e))

    if not records:
        typer.echo(f"No {settings.extension} documents found in {settings.blog_dir}.")
        raise typer.Exit(1)
    for record in records:
        typer.echo(f"{record.date_iso}  {record.slug}  {record.title}")
