"""
Main entry point for Arch Package List Fetcher.

Loads the filter set, fetches the package feed once and prints the
packages that pass the filters.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TextIO

import colorama
import coloredlogs
from pydantic import ValidationError

from arch_package_list_fetcher.classifier import classify_items
from arch_package_list_fetcher.config import (
    FEED_URL,
    FetcherError,
    FetchSettings,
    find_config_file,
    load_filter_patterns,
)
from arch_package_list_fetcher.filters import PackageFilter
from arch_package_list_fetcher.output import print_record
from arch_package_list_fetcher.rss_parser import FeedFetcher

logger = logging.getLogger(__name__)


class PackageListFetcher:
    """
    Package list fetcher application.

    Coordinates configuration loading, feed download, classification
    and output.
    """

    def __init__(
        self,
        config_path: str | Path,
        settings: FetchSettings | None = None,
        color: bool = True,
        stream: TextIO | None = None,
    ):
        """
        Initialize the fetcher.

        Parameters
        ----------
        config_path : str | Path
            Path to the TOML configuration file.
        settings : FetchSettings | None
            Download settings; defaults apply when None.
        color : bool
            Whether to colorize the output.
        stream : TextIO | None
            Where records are written; stdout when None.

        Raises
        ------
        ConfigLookupError
            If the configuration file cannot be read.
        ConfigError
            If the configuration or one of its patterns is invalid.
        """
        self.settings = settings or FetchSettings()
        self.filter_set = load_filter_patterns(config_path)
        self.matcher = PackageFilter(self.filter_set)
        self.color = color
        self.stream = stream

    async def run(self) -> int:
        """
        Fetch the feed and print the packages that pass the filters.

        Returns
        -------
        int
            Number of records printed.
        """
        async with FeedFetcher(
            timeout=self.settings.request_timeout,
            user_agent=self.settings.user_agent,
            proxy_url=self.settings.proxy,
        ) as fetcher:
            items = await fetcher.fetch_items(self.settings.feed_url)

        shown = 0
        for record in classify_items(self.matcher, items):
            print_record(record, self.color, self.stream)
            shown += 1

        logger.info("Showing %d of %d package(s)", shown, len(items))
        return shown


def setup_logging(verbose: bool = False) -> None:
    """
    Configure application logging.

    Parameters
    ----------
    verbose : bool
        If True, set log level to DEBUG.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    coloredlogs.install(
        level=level,
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries in verbose mode
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Show new Arch Linux packages, minus the filtered ones",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: XDG config lookup)",
    )
    parser.add_argument("--url", default=FEED_URL, help="Package feed URL")
    parser.add_argument(
        "--timeout", type=int, default=30, help="HTTP request timeout in seconds"
    )
    parser.add_argument("--proxy", default=None, help="Proxy URL for the request")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    setup_logging(args.verbose)
    colorama.just_fix_windows_console()

    color = not args.no_color and sys.stdout.isatty()

    try:
        settings = FetchSettings(
            feed_url=args.url,
            request_timeout=args.timeout,
            proxy=args.proxy,
        )
    except ValidationError as e:
        logger.error("Invalid settings: %s", e.errors()[0]["msg"])
        sys.exit(1)

    try:
        config_path = Path(args.config) if args.config else find_config_file()
        fetcher = PackageListFetcher(config_path, settings, color=color)
        asyncio.run(fetcher.run())
    except FetcherError as e:
        logger.error("%s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
