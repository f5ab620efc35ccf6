# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

from garage.cli.util_cli import app


def main() -> None:
    """Start the CLI. Session logging is enabled through `logging.session_log`."""
    app(prog_name="garage-util")


if __name__ == "__main__":
    main()
