"""Answer a single movie question from the command line.

Runs the same pipeline as the bot against the configured model and GraphQL endpoints.
"""

from __future__ import annotations

import argparse
import sys

from src.answer.pipeline import answer
from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; prints the answer (and optionally the compiled query)."""

    parser = argparse.ArgumentParser(description="Ask the movie graph a question in plain English.")
    parser.add_argument("question", nargs="+", help="The question, e.g. 'top 5 action movies'.")
    parser.add_argument(
        "--show-query",
        action="store_true",
        help="Also print the compiled GraphQL document.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    app = create_app(settings)
    result = answer(" ".join(args.question), gateway=app.gateway, executor=app.executor)

    if args.show_query and result.query is not None:
        print(result.query.document)
        print()
    print(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
