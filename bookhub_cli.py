#!/usr/bin/env python3
"""Book Hub CLI - browse and add books on a catalog backend."""
import argparse
import asyncio
import sys
import json
from tabulate import tabulate
from bookhub.client import BackendProbe
from bookhub.config import Config
from bookhub.models import DraftForm
from bookhub.session import CatalogSession
import logging

logger = logging.getLogger(__name__)


def setup_logging(config: Config):
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def truncate(text, width: int) -> str:
    text = text or ""
    return text[:width] + "..." if len(text) > width else text


def display_books(books, format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["Title", "Author", "Genre", "Tags", "Audio"]
        rows = [
            [
                truncate(book.title, 50),
                truncate(book.author, 30),
                book.genre,
                truncate(book.tags_str, 30),
                "yes" if book.audio_summary_url else ""
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps([book.to_dict() for book in books], indent=2))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.author} [{book.genre}]")


def report(session: CatalogSession, format_type: str) -> int:
    """Print the banner or the list, like the catalog panel does."""
    if session.banner:
        print(f"Error: {session.error}", file=sys.stderr)

    books = session.catalog.books
    if books:
        display_books(books, format_type)
    elif not session.catalog.loading:
        print("No books yet. Add one with the 'add' command.")

    return 1 if session.banner else 0


async def list_books(args, config: Config) -> int:
    """List books, optionally filtered."""
    async with CatalogSession.from_config(config) as session:
        if args.genre or args.query:
            session.catalog.set_filter("genre", args.genre or "")
            session.catalog.set_filter("query", args.query or "")
            await session.apply()
        return report(session, args.format)


async def add_book(args, config: Config) -> int:
    """Create a book and show the refreshed list."""
    async with CatalogSession.from_config(config) as session:
        for name in DraftForm.field_names():
            value = getattr(args, name)
            if value is not None:
                session.form.set_field(name, value)

        created = await session.form.submit()
        if created:
            logger.info(f"✅ Created '{args.title}'")

        code = report(session, args.format)
        print(f"Backend: {session.backend_url}")
        return code


def check_backend(args, config: Config) -> int:
    """Check that the backend answers."""
    with BackendProbe(config.BACKEND_URL, timeout=args.timeout) as probe:
        result = probe.check()

    rows = [
        ["URL", result.url],
        ["Reachable", "yes" if result.reachable else "no"],
        ["Status", result.status_code if result.status_code is not None else "N/A"],
        ["Latency (ms)", result.elapsed_ms if result.elapsed_ms is not None else "N/A"],
        ["Books", result.book_count if result.book_count is not None else "N/A"],
    ]
    if result.error:
        rows.append(["Error", truncate(result.error, 60)])
    print("\n" + tabulate(rows, tablefmt="grid"))

    return 0 if result.healthy else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book Hub - catalog browser for a book API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List everything
  %(prog)s list

  # Filter by genre and free text
  %(prog)s list --genre fantasy --query tolkien

  # Add a book
  %(prog)s add --title Dune --author "Frank Herbert" --genre sci-fi --tags "classic, space"

  # Check the backend
  %(prog)s check
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # List command
    list_parser = subparsers.add_parser("list", help="List books")
    list_parser.add_argument("--genre", help="Filter by genre")
    list_parser.add_argument("--query", "-q", help="Search by title, author, or tag")
    list_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")

    # Add command
    add_parser = subparsers.add_parser("add", help="Add a book")
    add_parser.add_argument("--title", required=True, help="Title")
    add_parser.add_argument("--author", required=True, help="Author")
    add_parser.add_argument("--genre", required=True, help="Genre")
    add_parser.add_argument("--description", help="Short description")
    add_parser.add_argument("--cover-url", dest="cover_url", help="Cover image URL")
    add_parser.add_argument("--content", help="Excerpt or content")
    add_parser.add_argument("--audio-summary-url", dest="audio_summary_url", help="Audio summary URL (mp3)")
    add_parser.add_argument("--tags", help="Tags (comma separated)")
    add_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check the backend")
    check_parser.add_argument("--timeout", type=float, default=10, help="Timeout in seconds (default: 10)")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    setup_logging(config)

    try:
        if args.command == "list":
            code = asyncio.run(list_books(args, config))

        elif args.command == "add":
            code = asyncio.run(add_book(args, config))

        elif args.command == "check":
            code = check_backend(args, config)

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
