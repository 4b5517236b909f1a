"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from postmatter.config import Settings, load_config
from postmatter.core.directives import find_directives
from postmatter.core.errors import DuplicateOutput, MalformedDocument
from postmatter.core.export import build_sidecar
from postmatter.core.parse import parse_file
from postmatter.core.pipeline import load_collection, run_export
from postmatter.logger import setup_logging


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
    setup_logging(settings.log_level)
    return settings


def _require(path: str) -> Path:
    p = Path(path)
    if not p.exists():
        _fail(f"Path not found: {path}")
    return p


def _require_file(path: str) -> Path:
    p = _require(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    return p


def show_cmd(
    path: Annotated[str, typer.Argument(help="Content file to parse")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the full sidecar JSON")] = False,
    ):
    """Parse one document and print its metadata and a body summary."""
    settings = _settings()
    try:
        doc = parse_file(_require_file(path))
    except MalformedDocument as e:
        _fail("Malformed document", e)

    if as_json:
        typer.echo(json.dumps(build_sidecar(doc, settings.parser_config), indent=2, ensure_ascii=False))
        return

    if not doc.has_frontmatter:
        typer.echo("(no front matter)")
    for key, value in doc.metadata.items():
        typer.echo(f"{key}: {value}")
    typer.echo(f"slug: {doc.slug}  body: {len(doc.body)} chars")


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to validate")],
    ):
    """Parse every document and report malformed ones. Exits 1 if any are found."""
    settings = _settings()
    result = load_collection(_require(path), settings.extensions, on_error="skip")
    for failure in result.failures:
        typer.echo(f"  malformed: {failure}")
    typer.echo(f"Checked {len(result.documents) + len(result.failures)} document(s): "
               f"{len(result.documents)} ok, {len(result.failures)} malformed")
    if result.failures:
        raise typer.Exit(1)


def export_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to export")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    on_error: Annotated[Optional[str], typer.Option("--on-error", help="skip or abort on malformed documents")] = None,
    ):
    """Write (metadata, body) sidecar JSON for each document to the output dir."""
    settings = _settings(overrides={"output_dir": out, "on_error": on_error})
    root = _require(path)
    output_dir = Path(settings.output_dir)

    try:
        result = load_collection(root, settings.extensions, settings.on_error)
    except MalformedDocument as e:
        _fail("Export aborted on malformed document", e)
    for failure in result.failures:
        typer.echo(f"  skipped: {failure}", err=True)

    try:
        results = run_export(result.documents, output_dir, root, settings.parser_config, settings.on_error)
    except DuplicateOutput as e:
        _fail("Export aborted on conflicting output path", e)
    except OSError as e:
        _fail("Export failed", e)
    for slug, json_path in results:
        typer.echo(f"  {slug} -> {json_path}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")


def directives_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to scan")],
    ):
    """List embedded directive tokens (e.g. gist placeholders) per document."""
    settings = _settings()
    try:
        result = load_collection(_require(path), settings.extensions, settings.on_error)
    except MalformedDocument as e:
        _fail("Malformed document", e)

    total = 0
    for doc in result.documents:
        for d in find_directives(doc.body, settings.parser_config):
            typer.echo(f"{doc.source}:{doc.body_offset + d.line}: {d.name} {' '.join(d.args)}".rstrip())
            total += 1
    typer.echo(f"Found {total} directive(s) in {len(result.documents)} document(s)")
