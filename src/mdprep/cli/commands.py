"""CLI command implementations

Core functions return result values; this module is the only place they are
rendered (JSON on stdout) and turned into exit codes.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from mdprep.config import Settings, load_config
from mdprep.core.liquid.scan import detect_liquid_tags
from mdprep.core.liquid.strip import strip_liquid_tags
from mdprep.core.pipeline import normalize_file, prepare_file, run_validate


TitleOpt       = Annotated[Optional[str], typer.Option("--title", help="Article title")]
TagsOpt        = Annotated[Optional[str], typer.Option("--tags", help="Comma-separated tags")]
MainImageOpt   = Annotated[Optional[str], typer.Option("--main-image", help="Cover image URL")]
DescriptionOpt = Annotated[Optional[str], typer.Option("--description", help="Article description")]
CanonicalOpt   = Annotated[Optional[str], typer.Option("--canonical-url", help="Canonical URL")]
PublishedOpt   = Annotated[Optional[bool], typer.Option("--published/--draft", help="Published state")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _echo_json(data: Any, settings: Settings) -> None:
    typer.echo(json.dumps(data, indent=settings.json_indent or None, ensure_ascii=False))


def _explicit(**params: Any) -> dict[str, Any]:
    """Keep only the options the user passed; omitted options stay absent."""
    return {k: v for k, v in params.items() if v is not None}


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def validate_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to validate")],
    title: TitleOpt = None,
    tags: TagsOpt = None,
    main_image: MainImageOpt = None,
    description: DescriptionOpt = None,
    canonical_url: CanonicalOpt = None,
    published: PublishedOpt = None,
    fail_on_warning: Annotated[Optional[bool], typer.Option("--fail-on-warning/--allow-warnings", help="Treat warnings as failures")] = None,
    ):
    """Dry-run validation: tags, images, front matter conflicts, liquid tags, content quality."""
    settings = _settings(overrides={"fail_on_warning": fail_on_warning})
    params = _explicit(
        title=title, tags=tags, main_image=main_image,
        description=description, canonical_url=canonical_url, published=published,
    )
    try:
        results = run_validate(path, params)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        _fail(f"No .md/.mdx files found at {path}")

    _echo_json({str(p): r.model_dump(mode="json") for p, r in results}, settings)

    failed = [p for p, r in results if not r.valid or (settings.fail_on_warning and r.warnings)]
    if failed:
        typer.echo(f"{len(failed)} of {len(results)} document(s) failed validation.", err=True)
        raise typer.Exit(1)


def frontmatter_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to normalize")],
    title: TitleOpt = None,
    tags: TagsOpt = None,
    main_image: MainImageOpt = None,
    description: DescriptionOpt = None,
    canonical_url: CanonicalOpt = None,
    series: Annotated[Optional[str], typer.Option("--series", help="Series name")] = None,
    published: PublishedOpt = None,
    ):
    """Strip front matter and show the merged parameters and any conflicts."""
    settings = _settings()
    params = _explicit(
        title=title, tags=tags, main_image=main_image, description=description,
        canonical_url=canonical_url, series=series, published=published,
    )
    try:
        result = normalize_file(Path(path), params)
    except RuntimeError as e:
        _fail(str(e))
    _echo_json(result.model_dump(mode="json"), settings)


def tags_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to scan")],
    ):
    """List liquid tags outside fenced code and their cross-post safety."""
    settings = _settings()
    report = detect_liquid_tags(_read(path))
    _echo_json(report.model_dump(mode="json"), settings)


def strip_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write to this file instead of stdout")] = None,
    ):
    """Replace liquid tags with portable markdown/HTML equivalents."""
    _settings()
    body = strip_liquid_tags(_read(path))
    if out:
        Path(out).write_text(body, encoding='utf-8')
        typer.echo(f"  {path} -> {out}")
    else:
        typer.echo(body, nl=False)


def crosspost_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to prepare")],
    canonical_url: Annotated[str, typer.Option("--canonical-url", help="Canonical URL of the original post")],
    strip: Annotated[Optional[bool], typer.Option("--strip-liquid/--keep-liquid", help="Convert liquid tags")] = None,
    ):
    """Prepare a body for cross-posting: convert liquid tags and attach the canonical URL."""
    settings = _settings(overrides={"strip_liquid_tags": strip})
    try:
        result = prepare_file(Path(path), canonical_url, settings.strip_liquid_tags)
    except RuntimeError as e:
        _fail(str(e))
    _echo_json(result.model_dump(mode="json"), settings)
