"""
Email notifier.

Sends a rendered HTML report to one recipient over SMTP. Transport settings
come from an explicit MailConfig; MailConfig.from_env() builds one from the
SMTP_* environment variables.
"""

import os
import smtplib
import ssl
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from config import DEFAULT_SMTP_PORT
from logger import get_logger
from models import ConfigError, SendError

logger = get_logger(__name__)

IMPLICIT_TLS_PORT = 465


@dataclass(frozen=True)
class MailConfig:
    """SMTP transport settings."""

    host: str
    port: int = DEFAULT_SMTP_PORT
    username: Optional[str] = None
    password: Optional[str] = None
    from_address: Optional[str] = None
    allow_insecure_certificates: bool = False

    @property
    def secure(self) -> bool:
        """Implicit TLS only on the SMTPS port."""
        return self.port == IMPLICIT_TLS_PORT

    @property
    def sender(self) -> Optional[str]:
        return self.from_address or self.username

    @classmethod
    def from_env(cls) -> "MailConfig":
        """
        Read SMTP settings from the environment.

        Environment Variables:
            - SMTP_HOST: SMTP server address (required)
            - SMTP_PORT: SMTP port (optional, defaults to 587)
            - SMTP_USER / SMTP_PASS: credentials (optional)
            - SMTP_FROM: from-address override (optional, defaults to SMTP_USER)
            - SMTP_ALLOW_INSECURE_CERTS: skip certificate checks (optional)
        """
        host = os.getenv("SMTP_HOST", "").strip()
        if not host:
            raise ConfigError("SMTP_HOST environment variable is not set")

        port_str = os.getenv("SMTP_PORT", str(DEFAULT_SMTP_PORT)).strip()
        try:
            port = int(port_str)
        except ValueError:
            raise ConfigError(f"Invalid SMTP_PORT value '{port_str}'")

        insecure = os.getenv("SMTP_ALLOW_INSECURE_CERTS", "").strip().lower()
        return cls(
            host=host,
            port=port,
            username=os.getenv("SMTP_USER") or None,
            password=os.getenv("SMTP_PASS") or None,
            from_address=os.getenv("SMTP_FROM") or None,
            allow_insecure_certificates=insecure in ("true", "1", "yes"),
        )


class Notifier:
    """Delivers HTML reports through an SMTP server."""

    def __init__(self, config: MailConfig):
        self.config = config

    def _tls_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if self.config.allow_insecure_certificates:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def _connect(self) -> smtplib.SMTP:
        """Open a new connection; TLS is implicit on 465, STARTTLS elsewhere."""
        context = self._tls_context()
        if self.config.secure:
            return smtplib.SMTP_SSL(self.config.host, self.config.port, context=context)

        server = smtplib.SMTP(self.config.host, self.config.port)
        server.ehlo()
        if server.has_extn("starttls"):
            server.starttls(context=context)
            server.ehlo()
        return server

    def build_message(self, recipient: str, subject: str, html_body: str) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = self.config.sender or ""
        message["To"] = recipient
        message["Subject"] = subject
        message.attach(MIMEText(html_body, "html", "utf-8"))
        return message

    def send(self, recipient: str, subject: str, html_body: str) -> None:
        """
        Send one HTML email.

        Raises SendError if the server rejects the message or cannot be
        reached. No retry is attempted.
        """
        message = self.build_message(recipient, subject, html_body)
        logger.info(f"Sending '{subject}' to {recipient} via {self.config.host}:{self.config.port}")

        try:
            server = self._connect()
            try:
                if self.config.username and self.config.password:
                    server.login(self.config.username, self.config.password)
                server.send_message(message)
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {recipient}: {e}", exc_info=True)
            raise SendError(f"Failed to send email to {recipient}: {e}") from e

        logger.info(f"Email sent successfully to {recipient}")
