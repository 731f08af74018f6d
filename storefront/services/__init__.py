"""Infrastructure services."""

from .mailer import EmailMessage, MailerError, ResendMailer
from .postgres import PostgresConnectionTester

__all__ = ["EmailMessage", "MailerError", "PostgresConnectionTester", "ResendMailer"]
