#!/usr/bin/env python3
"""
Regenerate README.md as a fixed-width profile report built from the
GitHub API: follower/star badges beside an ASCII figure, language bars,
a contributions table, and the most recent public activity.

Environment variables:
  GITHUB_TOKEN: Personal access token (required for the contributions query)
  GITHUB_USERNAME: GitHub username (default: m4ster-slave)
  README_OUTPUT_PATH: Output file, absolute or relative to the repo root (default: README.md)
"""

import sys

from profile_report.controller import main

if __name__ == "__main__":
    sys.exit(main())
