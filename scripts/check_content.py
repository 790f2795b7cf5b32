#!/usr/bin/env python3
"""Validate blog post files before they are published.

Usage:
    python -m scripts.check_content                    # Check content/blog
    python -m scripts.check_content path/to/posts      # Check another directory
    python -m scripts.check_content --strict           # Warnings → errors too
"""

import argparse
import sys

from samshodan_api.config import get_settings
from samshodan_api.services.content_check import check_content


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate blog content files")
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Content directory (defaults to the configured content_dir)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors (for CI)",
    )
    args = parser.parse_args()

    directory = args.directory or get_settings().content_dir
    result = check_content(directory)
    exit_code = 0

    if result.errors:
        print(f"Content check FAILED ({len(result.errors)} errors):\n")
        for err in result.errors:
            print(f"  ✗ {err}")
        exit_code = 1

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):\n")
        for warn in result.warnings:
            print(f"  ⚠ {warn}")
        if args.strict:
            exit_code = 1

    if exit_code == 0:
        print(f"\nContent check passed: {result.checked} posts in {directory}.")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
