"""
Classification of feed items.

Decides whether a feed item is shown and extracts the package name and
version from the titles that are.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from arch_package_list_fetcher.config import FetcherError
from arch_package_list_fetcher.filters import PackageFilter

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "unknown title"

# Category names containing this are packages in a testing repository
TESTING_CATEGORY = "Testing"


class MalformedTitleError(FetcherError):
    """
    Raised when a shown title does not have the "name version" shape.

    Attributes
    ----------
    title : str
        The offending title.
    """

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Malformed feed item title: '{title}'")


@dataclass(frozen=True)
class Category:
    """
    A feed item category.

    Attributes
    ----------
    name : str
        Category name, e.g. "Core" or "Extra Testing".
    """

    name: str


@dataclass
class FeedItem:
    """
    A package feed entry.

    Attributes
    ----------
    title : str | None
        Entry title, usually "name version arch". None when absent.
    categories : list[Category]
        Entry categories in feed order.
    """

    title: str | None = None
    categories: list[Category] = field(default_factory=list)

    @classmethod
    def from_feedparser(cls, entry: Any) -> "FeedItem":
        """
        Create a FeedItem from a feedparser entry.

        Parameters
        ----------
        entry : Any
            A feedparser entry object.

        Returns
        -------
        FeedItem
            Item holding the entry title and categories.
        """
        categories = []
        if hasattr(entry, "tags"):
            categories = [Category(tag.get("term") or "") for tag in entry.tags]

        return cls(title=entry.get("title"), categories=categories)


class DisplayRecord(NamedTuple):
    """Package name and version to show for a feed item."""

    package_name: str
    package_version: str


def classify(matcher: PackageFilter, item: FeedItem) -> DisplayRecord | None:
    """
    Decide whether a feed item is shown.

    Parameters
    ----------
    matcher : PackageFilter
        Compiled filter set.
    item : FeedItem
        The feed item to classify.

    Returns
    -------
    DisplayRecord | None
        The package name and version, or None if the item is skipped.

    Raises
    ------
    MalformedTitleError
        If the item is not skipped but its title has fewer than two
        space separated tokens, or has no title at all.
    """
    title = item.title if item.title is not None else UNKNOWN_TITLE

    if matcher.is_excluded(title):
        return None

    if any(TESTING_CATEGORY in category.name for category in item.categories):
        logger.debug("Item '%s' skipped: testing repository", title)
        return None

    # The placeholder is not a package title
    if item.title is None:
        raise MalformedTitleError(title)

    tokens = title.split(" ")
    if len(tokens) < 2:
        raise MalformedTitleError(title)

    return DisplayRecord(tokens[0], tokens[1])


def classify_items(
    matcher: PackageFilter, items: Iterable[FeedItem]
) -> Iterator[DisplayRecord]:
    """
    Yield the display records of the shown items, in feed order.

    Parameters
    ----------
    matcher : PackageFilter
        Compiled filter set.
    items : Iterable[FeedItem]
        Feed items to classify.

    Yields
    ------
    DisplayRecord
        One record per item that is not skipped.
    """
    for item in items:
        record = classify(matcher, item)
        if record is not None:
            yield record
