from __future__ import annotations

import json
import logging
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import Final

import typer

from statuses.cache import LookupCache, default_cache
from statuses.errors import DataError
from statuses.loader import file_record_source
from statuses.results import Found, LookupResult

app = typer.Typer(help="Translate HTTP status codes and reason phrases")

EXIT_OK: Final[int] = 0
EXIT_NOT_FOUND: Final[int] = 1
EXIT_DATA_ERROR: Final[int] = 2


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


_DATA_OPTION = typer.Option(
    None,
    "--data",
    help="Status definition file (.json, .yaml, .yml); defaults to STATUSES_CODES_PATH or the bundled set",
)
_FORMAT_OPTION = typer.Option(
    OutputFormat.TEXT,
    "--format",
    help="Output format: text|json",
    show_default=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def message(
    code: str,
    data: Path | None = _DATA_OPTION,
    format: OutputFormat = _FORMAT_OPTION,
) -> None:
    """Print the reason phrase for a status code."""
    cache = _cache_for(data)
    result = _guard(lambda: cache.message(code))
    _emit_lookup(query=code, field="message", result=result, output_format=format)


@app.command()
def code(
    message: str,
    data: Path | None = _DATA_OPTION,
    format: OutputFormat = _FORMAT_OPTION,
) -> None:
    """Print the status code for a reason phrase."""
    cache = _cache_for(data)
    result = _guard(lambda: cache.code(message))
    _emit_lookup(query=message, field="code", result=result, output_format=format)


@app.command("list")
def list_statuses(
    data: Path | None = _DATA_OPTION,
    format: OutputFormat = _FORMAT_OPTION,
) -> None:
    """Print every known status code with its reason phrase."""
    cache = _cache_for(data)
    pairs = tuple(_guard(cache.tables).code_to_message.items())
    if format is OutputFormat.JSON:
        typer.echo(
            json.dumps(
                [{"code": status, "message": text} for status, text in pairs],
                ensure_ascii=True,
                separators=(",", ":"),
            )
        )
        return
    for status, text in pairs:
        typer.echo(f"{status}\t{text}")


def _cache_for(data: Path | None) -> LookupCache:
    if data is None:
        return default_cache()
    return LookupCache(file_record_source(data))


def _guard[T](query: Callable[[], T]) -> T:
    try:
        return query()
    except DataError as exc:
        typer.echo(f"data error: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATA_ERROR) from exc


def _emit_lookup(
    *,
    query: str,
    field: str,
    result: LookupResult,
    output_format: OutputFormat,
) -> None:
    if output_format is OutputFormat.JSON:
        payload: dict[str, object] = {"query": query, "found": result.found}
        if isinstance(result, Found):
            payload[field] = result.value
        typer.echo(json.dumps(payload, ensure_ascii=True, separators=(",", ":")))
    elif isinstance(result, Found):
        typer.echo(result.value)
    else:
        typer.echo(f"no {field} is defined for {query!r}", err=True)
    if not result.found:
        raise typer.Exit(code=EXIT_NOT_FOUND)
