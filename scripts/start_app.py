#!/usr/bin/env python3
"""Start the mailer with Logfire error tracking for startup errors."""

import asyncio
import sys

import logfire
import uvicorn

from ideamarket.adapter.smtp import SmtpMailTransport
from ideamarket.config import Settings
from ideamarket.domain.error import MailDispatchError
from ideamarket.util.logging import setup_logging
from ideamarket.util.observability import configure_logfire


def verify_smtp(settings: Settings) -> bool:
    """Check the SMTP relay accepts our credentials.

    A failure is logged and the server starts anyway: invitations are then
    recorded with status error until the relay is fixed.
    """
    mail = settings.mail
    transport = SmtpMailTransport(
        host=mail.smtp_host,
        port=mail.smtp_port,
        secure=mail.smtp_secure,
        user=mail.smtp_user,
        password=mail.smtp_pass,
    )
    try:
        asyncio.run(transport.verify())
    except MailDispatchError as e:
        logfire.error("SMTP verify failed", host=mail.smtp_host, error=str(e))
        return False
    return True


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    verify_smtp(settings)

    try:
        logfire.info("Starting mailer", port=settings.port)

        # Importing the app builds the DI container with the same settings
        uvicorn.run(
            "ideamarket.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
