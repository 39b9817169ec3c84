"""
Monitoring Configuration

Loads error tracking settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MonitoringConfig:
    """Configuration for monitoring services."""

    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "development"
    sentry_traces_sample_rate: float = 0.0

    # Tagged on every event
    app_name: str = "bball-tracker"
    device_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "MonitoringConfig":
        """Create config from environment variables."""
        return cls(
            sentry_dsn=os.getenv("SENTRY_DSN"),
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "development"),
            sentry_traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
            app_name=os.getenv("BBALL_APP_NAME", "bball-tracker"),
            device_id=os.getenv("BBALL_DEVICE_ID"),
        )

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
