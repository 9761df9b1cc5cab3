#!/usr/bin/env python3
"""Book Catalog CLI - fetch, merge and filter books from Google Books."""
import argparse
import asyncio
import logging
import sys

from bookcatalog.async_client import AsyncGoogleBooksClient
from bookcatalog.client import GoogleBooksClient
from bookcatalog.config import Config
from bookcatalog.render import FORMATS, LOADING_MESSAGE, render_genres, render_view
from bookcatalog.view import ALL_GENRES, CatalogView, Phase

logger = logging.getLogger(__name__)

INTERACTIVE_HELP = """Commands:
  search <text>   set the search text (empty clears it)
  genre <name>    select a genre ("All" clears it)
  genres          list available genres
  quit            exit"""


def setup_logging(level: str):
    """Configure root logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


async def load_catalog_async(view: CatalogView, config: Config):
    """Run a fetch cycle with the async client."""
    async with AsyncGoogleBooksClient(
        api_key=config.GOOGLE_BOOKS_API_KEY,
        timeout=config.CATALOG_TIMEOUT,
        max_concurrent=max(1, len(view.topics))
    ) as client:
        await view.fetch_catalog(client)


def load_catalog_sync(view: CatalogView, config: Config):
    """Run a fetch cycle with the blocking client."""
    with GoogleBooksClient(
        api_key=config.GOOGLE_BOOKS_API_KEY,
        timeout=config.CATALOG_TIMEOUT
    ) as client:
        view.fetch_catalog_sync(client)


def run_interactive(view: CatalogView, format_type: str, stdin=None, stdout=None):
    """Re-render the view after each search or genre change read from stdin."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(INTERACTIVE_HELP, file=stdout)
    for line in stdin:
        command, _, argument = line.strip().partition(" ")
        command = command.lower()

        if command in ("quit", "exit"):
            break
        elif command == "search":
            view.set_search_text(argument)
        elif command == "genre":
            view.set_genre(argument.strip() or ALL_GENRES)
        elif command == "genres":
            print(render_genres(view.genres), file=stdout)
            continue
        elif command:
            print(INTERACTIVE_HELP, file=stdout)
            continue
        else:
            continue

        print(render_view(view, format_type), file=stdout)


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Book Catalog - browse a merged Google Books catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the whole catalog
  %(prog)s

  # Filter by text and genre
  %(prog)s --search prog --genre Computers

  # List genres present in the catalog
  %(prog)s --genres

  # Refine the filter interactively
  %(prog)s --interactive
        """
    )
    parser.add_argument("--search", default="", help="Search title, author or genre")
    parser.add_argument("--genre", default=ALL_GENRES, help="Genre filter (default: All)")
    parser.add_argument("--format", choices=FORMATS, default="table", help="Output format")
    parser.add_argument("--genres", action="store_true", help="List genres instead of books")
    parser.add_argument("--sync", action="store_true", help="Use the blocking client")
    parser.add_argument("--interactive", action="store_true", help="Read filter changes from stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    config = Config()
    setup_logging("DEBUG" if args.verbose else config.LOG_LEVEL.upper())

    try:
        view = CatalogView.from_config(config)
        view.set_search_text(args.search)
        view.set_genre(args.genre)

        print(LOADING_MESSAGE, file=sys.stderr)
        if args.sync:
            load_catalog_sync(view, config)
        else:
            asyncio.run(load_catalog_async(view, config))

        if view.state.phase is not Phase.READY:
            print(render_view(view, args.format))
            return 1

        if args.genres:
            print(render_genres(view.genres))
        else:
            print(render_view(view, args.format))

        if args.interactive:
            run_interactive(view, args.format)

        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
