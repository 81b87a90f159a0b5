"""CLI entry point for the tangent_diagrams package.

Invoke as:  python -m tangent_diagrams
"""

import argparse
import logging
import sys

from ._common import HEIGHT, WIDTH, WINDOW_TITLE
from .window import DisplayUnavailableError, open_window


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="tangent-diagrams",
        description="Show the tangent lines to y = x^2 at (2, 4) and (-2, 4).",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print(f"{WINDOW_TITLE} ({WIDTH}x{HEIGHT})")
    try:
        open_window()
    except DisplayUnavailableError as e:
        print(f"Cannot open window: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
