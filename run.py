"""Start the calculator from a source checkout without installing it: python run.py"""
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent / "src"))

from graphicalcalculator.app.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
