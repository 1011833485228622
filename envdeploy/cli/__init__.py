"""Main CLI application module.

This module provides the entry points for envdeploy:

- envdeploy: ``envdeploy ENVIRONMENT ARGS...``
- production / staging / development: ``production ARGS...`` and so on
"""

from .commands import app, development_app, production_app, staging_app


def main() -> None:
    """Main entry point for the CLI."""
    app()


__all__ = ["app", "production_app", "staging_app", "development_app", "main"]


if __name__ == "__main__":
    main()
