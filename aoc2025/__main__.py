import sys

from aoc2025.cli import main

if __name__ == "__main__":
    sys.exit(main())
