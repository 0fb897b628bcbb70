import os
import json
from typing import List, Any, Dict
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


class BookModel(BaseModel):
    title: str | None = None
    author: str | None = None
    genres: List[str] = []
    pages: int | None = None
    published_year: int | None = None
    tags: List[str] = []


class StatsModel(BaseModel):
    total_books: int
    unique_authors: int
    unique_genres: int
    total_pages: int


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unknown output mode: {mode!r}. Use plain, json or rich.")
    os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.default_output).lower()


def print_books_result(books: List[Any], empty_message: str = "No books in library.") -> None:
    """Print books according to the current output mode.
    - plain: 'Title by Author (Year, N pages)' lines
    - json: JSON array of every book field
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("[]" if mode == "json" else empty_message)
        return

    if mode == "json":
        payload = [BookModel(**b.to_dict()).model_dump() for b in books]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", style="magenta", no_wrap=True)
        table.add_column("Pages", justify="right")
        table.add_column("Genres", style="green")
        for b in books:
            table.add_row(str(b.title), str(b.author), str(b.published_year), str(b.pages), ", ".join(b.genres))
        _console.print(table)
    else:
        for b in books:
            print(str(b))


def print_labels_result(labels: List[str], title: str, empty_message: str) -> None:
    """Print a flat list of labels (titles, genres, tags), one per line in plain mode."""
    mode = get_output_mode()

    if not labels:
        print("[]" if mode == "json" else empty_message)
        return

    if mode == "json":
        print(json.dumps(labels, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column(title)
        for i, label in enumerate(labels, 1):
            table.add_row(str(i), str(label))
        _console.print(table)
    else:
        for label in labels:
            print(label)


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("{}" if mode == "json" else "No statistics available.")
        return

    model = StatsModel(**stats)

    if mode == "json":
        print(json.dumps(model.model_dump(), ensure_ascii=False))
    elif mode == "rich":
        content = (f"[bold]Total Books:[/] {model.total_books}\n"
                   f"[bold]Unique Authors:[/] {model.unique_authors}\n"
                   f"[bold]Unique Genres:[/] {model.unique_genres}\n"
                   f"[bold]Total Pages:[/] {model.total_pages}")
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {model.total_books}")
        print(f"Unique Authors: {model.unique_authors}")
        print(f"Unique Genres: {model.unique_genres}")
        print(f"Total Pages: {model.total_pages}")
