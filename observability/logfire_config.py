"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the API server
and the outbound Gemini calls.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional, logs stay local without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once and falls back to
    console-only logging when no token is configured.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire with project token.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment (or set ENVIRONMENT env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN")

        logfire.configure(
            token=token or None,
            service_name="email-writer",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire=bool(token),
        )

        cls._initialized = True

        if not token:
            logfire.warning("LOGFIRE_TOKEN not set, logging to console only")

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
