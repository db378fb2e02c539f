"""Runtime environments.

The environment selects the log renderer: human-readable console output
in development, one JSON object per line everywhere else.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running (ENVIRONMENT variable)."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Machine-readable logs outside local development."""
        return self is not Environment.DEVELOPMENT
