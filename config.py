"""
Configuration for the vehicle expiry report service.

Values are read from the environment (a .env file is loaded by the entry
points). SMTP credentials are read by notifier.MailConfig.from_env().
"""

import logging
import os

_logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("true", "1", "yes")


# ============================================================================
# SMTP
# ============================================================================

# Used when SMTP_PORT is not set. 465 means implicit TLS, anything else
# starts in plaintext and upgrades with STARTTLS.
DEFAULT_SMTP_PORT = 587

# ============================================================================
# Report
# ============================================================================

# Subject line; {month} is the "YYYY-MM" label.
EMAIL_SUBJECT_TEMPLATE = "Vehicle Document Expiry Report - {month}"

# Options: 'per-document' (one table per document kind) or 'combined'
REPORT_LAYOUT = os.getenv("REPORT_LAYOUT", "per-document").strip().lower()

if REPORT_LAYOUT not in ("per-document", "combined"):
    _logger.warning(
        f"Invalid REPORT_LAYOUT value '{REPORT_LAYOUT}'. Using default: per-document."
    )
    REPORT_LAYOUT = "per-document"

# Escape registration numbers and dates taken from the upload
REPORT_ESCAPE_HTML = _env_flag("REPORT_ESCAPE_HTML", True)

if not REPORT_ESCAPE_HTML:
    _logger.warning("REPORT_ESCAPE_HTML is disabled. Uploaded values are inserted into the report as raw HTML.")

# ============================================================================
# Logging
# ============================================================================

# Optional log file; console logging is always on
LOG_FILE = os.getenv("LOG_FILE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR"):
    _logger.warning(f"Invalid LOG_LEVEL value '{LOG_LEVEL}'. Using default: INFO.")
    LOG_LEVEL = "INFO"

# ============================================================================
# Web
# ============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")
