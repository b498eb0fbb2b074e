"""Module entry point for running with python -m md2folder."""

from md2folder.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
