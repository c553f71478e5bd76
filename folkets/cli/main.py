"""
Command-line interface: show, search, check.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from tqdm import tqdm

from folkets.core.config import ViewerConfig, load_config
from folkets.core.constants import ERROR_ENTRY_UNAVAILABLE
from folkets.core.errors import ParseError, StoreError
from folkets.core.lexical import Language
from folkets.core.logging_config import configure_logging
from folkets.core.parsing import parse
from folkets.data.store import LexiconStore
from folkets.rendering.text import render_entry

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

LanguageOption = typer.Option(None, "--language", "-l", help="Language of the word (en/sv)")
DatabaseOption = typer.Option(None, "--db", help="Path to the Folkets database")


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load(**overrides) -> ViewerConfig:
    try:
        return load_config(**overrides)
    except ValidationError as exc:
        _fail(f"Invalid configuration: {exc}")


def _resolve(language: Optional[str], db: Optional[Path], **overrides) -> ViewerConfig:
    return _load(language_code=language, database_path=db, **overrides)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    config = _load()
    configure_logging(logging.DEBUG if verbose else config.log_level)


@app.command()
def show(
    word: str = typer.Argument(...),
    language: Optional[str] = LanguageOption,
    db: Optional[Path] = DatabaseOption,
) -> None:
    config = _resolve(language, db)
    store = LexiconStore(config.database_path)
    try:
        entries = store.find_entries(word, config.language_code)
    except ParseError as exc:
        _fail(f"{ERROR_ENTRY_UNAVAILABLE}: {exc}")
    except StoreError as exc:
        _fail(str(exc))

    if not entries:
        _fail(f"No entry for {word}")

    typer.echo("\n".join(render_entry(entry) for entry in entries), nl=False)


@app.command()
def search(
    prefix: str = typer.Argument(...),
    language: Optional[str] = LanguageOption,
    db: Optional[Path] = DatabaseOption,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
) -> None:
    config = _resolve(language, db, search_limit=limit)
    store = LexiconStore(config.database_path)
    try:
        words = store.search(prefix, config.language, limit=config.search_limit)
    except StoreError as exc:
        _fail(str(exc))

    for found in words:
        typer.echo(found)


@app.command()
def check(
    language: Optional[str] = LanguageOption,
    db: Optional[Path] = DatabaseOption,
) -> None:
    """Parse every record of a dataset and report the ones that fail."""
    config = _resolve(language, db)
    lang: Language = config.language
    store = LexiconStore(config.database_path)
    parsed = 0
    failed = 0
    try:
        total = store.count(lang)
        for record in tqdm(store.iter_records(lang), total=total, desc=lang.table_name, disable=None):
            try:
                parse(record)
                parsed += 1
            except ParseError as exc:
                failed += 1
                logger.warning("Record %r failed: %s", record.get("word"), exc)
    except StoreError as exc:
        _fail(str(exc))

    typer.echo(f"Dataset: {lang.table_name}; Parsed: {parsed}; Failed: {failed}")
    if failed:
        raise typer.Exit(code=1)


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
