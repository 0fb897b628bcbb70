import logging
from typing import Optional

import typer

from book import Book, BookFieldError
from config import settings
from library import Library
from utils.ui_helpers import set_output_mode, print_books_result, print_labels_result, print_stats_result


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.WARNING


logging.basicConfig(level=resolve_log_level(settings.log_level))
logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    {"title": "Ruby 101", "author": "Alice", "genres": ["Programming", "Education"], "pages": 200,
     "published_year": 2020, "tags": ["ruby", "beginner"]},
    {"title": "RSpec Mastery", "author": "Bob", "genres": ["Programming", "Testing"], "pages": 350,
     "published_year": 2022, "tags": ["rspec", "advanced"]},
    {"title": "Gardening Basics", "author": "Alice", "genres": ["Hobby", "Outdoors"], "pages": 120,
     "published_year": 2018, "tags": ["plants"]},
]


def build_sample_library() -> Library:
    """The three-book sample catalog the CLI answers queries against."""
    return Library([Book.from_dict(data) for data in SAMPLE_BOOKS])


# --- Typer CLI application ---
app = typer.Typer(help=f"{settings.app_name} CLI")


@app.callback()
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global CLI options (e.g. output mode)."""
    if output:
        try:
            set_output_mode(output)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--output") from e
    try:
        ctx.obj = build_sample_library()
    except BookFieldError as e:
        # Only reachable with strict construction turned on
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    logger.debug("Loaded sample library with %d books", len(ctx.obj))


@app.command("list")
def cli_list(ctx: typer.Context):
    """List every book."""
    print_books_result(ctx.obj.books)


@app.command("titles")
def cli_titles(ctx: typer.Context):
    """List book titles in library order."""
    print_labels_result(ctx.obj.titles(), "Titles", "No books in library.")


@app.command("genres")
def cli_genres(ctx: typer.Context):
    """List genres once each, in order of first appearance."""
    print_labels_result(ctx.obj.genres(), "Genres", "No genres in library.")


@app.command("tags")
def cli_tags(ctx: typer.Context):
    """List every tag of every book."""
    print_labels_result(ctx.obj.tags(), "Tags", "No tags in library.")


@app.command("by-author")
def cli_by_author(ctx: typer.Context, author: str = typer.Argument(..., help="Exact author name")):
    """List books written by AUTHOR."""
    print_books_result(ctx.obj.find_by_author(author), empty_message=f"No books by {author}.")


@app.command("stats")
def cli_stats(ctx: typer.Context):
    """Show library statistics."""
    print_stats_result(ctx.obj.get_statistics())


if __name__ == "__main__":
    app()
