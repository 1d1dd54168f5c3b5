"""
Entry point for running MarkQuill as a module.

Usage:
    python -m markquill process report.md --output report.processed.md
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
