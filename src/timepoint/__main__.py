"""
Entry point for timepoint.

Usage:
    python -m timepoint [VALUE ...]
    timepoint [VALUE ...]  # if installed via pip
"""

from timepoint.cli import app


def main() -> None:
    """Main entry point."""
    app(prog_name="timepoint")


if __name__ == "__main__":
    main()
