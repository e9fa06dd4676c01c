"""Command-line interface."""
import sys

from graphicalcalculator.app.main import main

if __name__ == "__main__":
    sys.exit(main())
