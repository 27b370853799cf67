"""
Adaptateurs de notification client.
"""

from src.adapters.notifications.logging_email import LoggingEmailService

__all__ = ["LoggingEmailService"]
