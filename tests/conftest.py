"""
Shared fixtures for Arch Package List Fetcher tests.

Provides common test fixtures for use across all test modules.
"""

from pathlib import Path
from xml.sax.saxutils import escape

import pytest

from arch_package_list_fetcher.classifier import Category, FeedItem
from arch_package_list_fetcher.config import CONFIG_FILE_NAME
from arch_package_list_fetcher.filters import PackageFilter


# Path to test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

FEED_URL = "https://archlinux.org/feeds/packages/"


def make_feed(items: list[tuple[str, list[str]]]) -> str:
    """
    Build an RSS 2.0 document from (title, categories) pairs.

    Parameters
    ----------
    items : list[tuple[str, list[str]]]
        Item titles and category names, in feed order.

    Returns
    -------
    str
        The RSS document.
    """
    body = []
    for title, categories in items:
        category_xml = "".join(f"<category>{escape(c)}</category>" for c in categories)
        body.append(f"<item><title>{escape(title)}</title>{category_xml}</item>")

    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<rss version="2.0"><channel>'
        "<title>Arch Linux: Recent package updates</title>"
        "<link>https://archlinux.org/packages/</link>"
        "<description>Recently updated packages</description>"
        f"{''.join(body)}"
        "</channel></rss>"
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_feed_content(fixtures_dir: Path) -> str:
    """Return contents of the sample package feed."""
    return (fixtures_dir / "packages.xml").read_text()


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Return path to sample config file."""
    return fixtures_dir / "sample_config.toml"


@pytest.fixture
def sample_patterns() -> list[str]:
    """Filter patterns matching the sample config file."""
    return ["^haskell-", r"^php\d?-?"]


@pytest.fixture
def sample_matcher(sample_patterns: list[str]) -> PackageFilter:
    """Compiled sample filter set."""
    return PackageFilter(sample_patterns)


@pytest.fixture
def empty_matcher() -> PackageFilter:
    """Matcher that excludes nothing."""
    return PackageFilter([])


@pytest.fixture
def testing_item() -> FeedItem:
    """An item from a testing repository."""
    return FeedItem(title="zig 0.9.0", categories=[Category("Testing")])


@pytest.fixture
def xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the XDG configuration lookup at a temporary directory.

    Returns
    -------
    Path
        The directory used as XDG_CONFIG_HOME.
    """
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "system"))
    return config_home


@pytest.fixture
def user_config(xdg_config_home: Path, sample_config_path: Path) -> Path:
    """Install the sample config as the user's configuration file."""
    config_path = xdg_config_home / CONFIG_FILE_NAME
    config_path.write_text(sample_config_path.read_text())
    return config_path


@pytest.fixture
def feed_builder():
    """Return the make_feed helper."""
    return make_feed
