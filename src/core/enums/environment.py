"""Runtime environment names accepted by the ENVIRONMENT setting."""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running.

    Only DEVELOPMENT changes behavior today: console log rendering and the
    /config endpoint. Every other value logs JSON.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
