"""
Command-line interface for the podcast digest.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import Settings, validate_episode_limit
from .errors import PodcastDigestError
from .factory import create_manager
from .manager import PreviewResult, RunReport
from .podcasts import PODCASTS, select_podcasts
from .repository import MATCHERS

SEPARATOR = "=" * 50


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Summarize new podcast episodes from RSS feeds"
    )
    parser.add_argument(
        "--store", help="Path to the summaries JSON store"
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum new episodes to summarize per podcast",
    )
    parser.add_argument(
        "--podcast",
        action="append",
        dest="podcast_ids",
        metavar="ID",
        help="Only process this podcast (repeatable)",
    )
    parser.add_argument(
        "--match-by",
        choices=sorted(MATCHERS),
        help="How to recognize already summarized episodes",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Disable progress bars"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")
    preview = subparsers.add_parser(
        "preview",
        help="Summarize the latest episode of one podcast without saving",
    )
    preview.add_argument(
        "podcast_id",
        nargs="?",
        default=PODCASTS[0].id,
        help="Podcast to preview (default: %(default)s)",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configure console logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )
    # Keep HTTP client chatter out of the progress output
    for name in ("httpx", "httpcore", "urllib3", "anthropic"):
        logging.getLogger(name).setLevel(logging.WARNING)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply command-line overrides to settings."""
    if args.store:
        settings.store_path = args.store
    if args.limit is not None:
        settings.episode_limit = validate_episode_limit(args.limit, "--limit")
    if args.match_by:
        settings.match_by = args.match_by
    return settings


def print_report(report: RunReport) -> None:
    """Print the result of a run."""
    print(SEPARATOR)
    for outcome in report.outcomes:
        if outcome.error:
            print(f"  {outcome.podcast_name}: failed ({outcome.error})")
        else:
            print(f"  {outcome.podcast_name}: {outcome.new_episodes} new")
    print(f"Done! Total episodes in database: {report.total_episodes}")


def print_preview(result: PreviewResult) -> None:
    """Print the result of a preview."""
    if result.summary is None:
        print("No transcript found in RSS feed")
        print("\nAvailable fields:")
        for name, length in result.field_lengths.items():
            print(f"- {name}: {f'{length} chars' if length else 'none'}")
        return

    summary = result.summary
    insights = summary.get("key_insights") or []
    print(SEPARATOR)
    print(f"One-liner: {summary.get('one_liner', '')}")
    print(f"Read time: {summary.get('estimated_read_time', '')}")
    print(f"\nKey insights: {len(insights)}")
    print(f"Takeaways: {len(summary.get('actionable_takeaways') or [])}")
    print(f"Quotes: {len(summary.get('notable_quotes') or [])}")
    print(SEPARATOR)

    if insights:
        first = insights[0]
        print("\nFirst insight:")
        print(f"\n[{first.get('category', '')}] {first.get('title', '')}")
        print(first.get("content", "")[:300] + "...")


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the podcast digest."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = apply_overrides(Settings.from_env(), args)
        manager = create_manager(settings)

        if args.command == "preview":
            podcast = select_podcasts([args.podcast_id])[0]
            result = manager.preview(podcast)
            if result is None:
                print(f"No episodes found for {podcast.name}", file=sys.stderr)
                sys.exit(1)
            print_preview(result)
            return

        podcasts = select_podcasts(args.podcast_ids)
        print(f"Using store: {settings.store_path}")
        report = manager.run(
            podcasts,
            limit=settings.episode_limit,
            show_progress=not args.no_progress,
        )
        print_report(report)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except (PodcastDigestError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
