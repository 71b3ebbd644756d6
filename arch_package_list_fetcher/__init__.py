"""
Arch Package List Fetcher - Show new Arch Linux packages in the terminal.

Fetches the archlinux.org package feed, drops the entries matching a
user-configured set of regular expressions (and everything in a Testing
repository) and prints the remaining package name/version pairs.
"""

__version__ = "1.0.0"
