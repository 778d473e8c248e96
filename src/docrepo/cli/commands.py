"""CLI command implementations"""

import json
from datetime import datetime
from typing import Annotated, Optional

import typer

from docrepo.config import Settings, configure_logging, load_config
from docrepo.core.load import load_documents, seed_repo
from docrepo.crud.memory_repo import MemoryRepo
from docrepo.crud.models import Document, SearchRequest
from docrepo.crud.repo import InvalidArgumentError


FileOpt = Annotated[Optional[str], typer.Option("--file", "-f", help="YAML/JSON seed file")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="text or json")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings)
    return settings


def _repo(settings: Settings) -> MemoryRepo:
    """Build a fresh repository seeded from the configured data file."""
    repo = MemoryRepo()
    try:
        seed_repo(repo, load_documents(settings.data_file))
    except FileNotFoundError:
        _fail(f"Data file not found: {settings.data_file}")
    except ValueError as e:
        _fail(f"Could not load {settings.data_file}", e)
    return repo


def _echo_docs(docs: list[Document], output_format: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2))
        return
    for d in docs:
        author = d.author.id if d.author and d.author.id else "-"
        created = d.created.isoformat() if d.created else "-"
        typer.echo(f"  {d.id}  {d.title or '-'}  {author}  {created}")
    typer.echo(f"{len(docs)} document(s)")


def search_cmd(
    file: FileOpt = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", help="Created strictly after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", help="Created strictly before")] = None,
    output_format: FormatOpt = None,
    ):
    """Search the seeded documents; every given filter must match."""
    settings = _settings(overrides={"data_file": file, "output_format": output_format})
    repo = _repo(settings)
    request = SearchRequest(
        title_prefixes=title_prefix, contains_contents=contains, author_ids=author,
        created_from=created_from, created_to=created_to,
    )
    _echo_docs(repo.search(request), settings.output_format)


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: FileOpt = None,
    output_format: FormatOpt = None,
    ):
    """Show a single document by id."""
    settings = _settings(overrides={"data_file": file, "output_format": output_format})
    repo = _repo(settings)
    try:
        doc = repo.find_by_id(doc_id)
    except InvalidArgumentError as e:
        _fail(str(e))
    if doc is None:
        typer.echo(f"Not found: {doc_id}", err=True)
        raise typer.Exit(1)
    _echo_docs([doc], settings.output_format)


def list_cmd(
    file: FileOpt = None,
    output_format: FormatOpt = None,
    ):
    """List every seeded document."""
    settings = _settings(overrides={"data_file": file, "output_format": output_format})
    _echo_docs(_repo(settings).all(), settings.output_format)
