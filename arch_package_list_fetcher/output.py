"""
Terminal output of display records.

Package names are shown in green and versions in red.
"""

import sys
from typing import TextIO

from colorama import Fore, Style

from arch_package_list_fetcher.classifier import DisplayRecord


def format_record(record: DisplayRecord, color: bool = True) -> str:
    """
    Format a record as a "name version" line, without the newline.

    Parameters
    ----------
    record : DisplayRecord
        The record to format.
    color : bool
        Whether to add ANSI color codes.

    Returns
    -------
    str
        The formatted line.
    """
    if not color:
        return f"{record.package_name} {record.package_version}"

    return (
        f"{Fore.GREEN}{record.package_name}{Style.RESET_ALL} "
        f"{Fore.RED}{record.package_version}{Style.RESET_ALL}"
    )


def print_record(
    record: DisplayRecord, color: bool = True, stream: TextIO | None = None
) -> None:
    """Write one formatted record line to ``stream`` (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    print(format_record(record, color), file=stream)
