"""Allow running the fetcher with ``python -m arch_package_list_fetcher``."""

from arch_package_list_fetcher.main import main

if __name__ == "__main__":
    main()
