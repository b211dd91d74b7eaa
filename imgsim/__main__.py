"""
Allow running the package with: python -m imgsim

Examples:
    python -m imgsim pair -a a.png -b b.png
    python -m imgsim directory -d /path/to/photos
    python -m imgsim match -i query.png -d /path/to/photos
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
