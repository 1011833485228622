"""CLI command modules.

Command Apps:
- app: ``envdeploy ENVIRONMENT ARGS...`` for any environment
- production_app, staging_app, development_app: one executable per
  standard environment
"""

from .environment import (
    app,
    development_app,
    environment_app,
    production_app,
    staging_app,
)

__all__ = [
    "app",
    "environment_app",
    "production_app",
    "staging_app",
    "development_app",
]
