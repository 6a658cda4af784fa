"""Exceptions raised by the expiry report pipeline."""


class ExpiryReportError(Exception):
    """Base class for all pipeline errors."""


class ValidationError(ExpiryReportError):
    """A required submission field is missing."""


class DecodeError(ExpiryReportError):
    """The uploaded buffer is not a readable workbook."""


class SendError(ExpiryReportError):
    """The mail transport rejected the message or could not be reached."""


class ProcessingError(ExpiryReportError):
    """Any failure after validation, reported to the client uniformly."""


class ConfigError(ValueError):
    """Required configuration is missing or malformed."""
