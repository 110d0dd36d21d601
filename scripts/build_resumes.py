#!/usr/bin/env python3
"""
Build all resumes from the source tree.

Same as the `vitae-build` console script.

Usage:
    python scripts/build_resumes.py [THEME] [--format html|pdf] [--verbose]
"""

from vitae.cli import app

if __name__ == "__main__":
    app()
