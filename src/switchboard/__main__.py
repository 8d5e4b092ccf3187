"""Main entry point for `python -m switchboard`."""

from switchboard.cli import cli

if __name__ == "__main__":
    cli()
