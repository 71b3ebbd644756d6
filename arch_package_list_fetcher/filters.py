"""
Title filtering for feed entries.

Compiles the configured filter set once and answers whether a title is
excluded by any of its patterns.
"""

import logging
import re
from collections.abc import Iterable

from arch_package_list_fetcher.config import ConfigError

logger = logging.getLogger(__name__)


class InvalidPatternError(ConfigError):
    """
    Raised when a filter pattern is not a valid regular expression.

    Attributes
    ----------
    pattern : str
        The pattern that failed to compile.
    reason : str
        The underlying syntax problem.
    """

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid filter pattern '{pattern}': {reason}")


class PackageFilter:
    """
    Compiled set of filter patterns.

    A title is excluded when any pattern matches anywhere in it. Patterns
    are case-sensitive; use ``^`` to anchor them to the start of the title.
    """

    def __init__(self, patterns: Iterable[str]):
        """
        Compile the patterns.

        Parameters
        ----------
        patterns : Iterable[str]
            Regular expression sources, in configuration order.

        Raises
        ------
        InvalidPatternError
            If any pattern fails to compile. No matcher is built then.
        """
        self.patterns: tuple[str, ...] = tuple(patterns)
        self._compiled: tuple[re.Pattern, ...] = tuple(
            self._compile(pattern) for pattern in self.patterns
        )
        logger.debug("Compiled %d filter pattern(s)", len(self._compiled))

    @staticmethod
    def _compile(pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e

    def is_excluded(self, title: str) -> bool:
        """
        Check whether a title matches any filter pattern.

        Parameters
        ----------
        title : str
            The feed entry title, used as is.

        Returns
        -------
        bool
            True if at least one pattern matches somewhere in the title.
        """
        for pattern in self._compiled:
            if pattern.search(title) is not None:
                logger.debug("Title '%s' excluded by pattern '%s'", title, pattern.pattern)
                return True
        return False

    def __len__(self) -> int:
        return len(self._compiled)


def compile_filter_set(patterns: Iterable[str]) -> PackageFilter:
    """Compile a filter set into a matcher."""
    return PackageFilter(patterns)


def is_excluded(matcher: PackageFilter, title: str) -> bool:
    """Return True if ``title`` matches any pattern of ``matcher``."""
    return matcher.is_excluded(title)
