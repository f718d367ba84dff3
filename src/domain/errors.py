"""
Exception classes for the mail sending domain.
"""


class MailClientError(Exception):
    """Base exception for mail client errors."""
    pass


class ConfigurationError(MailClientError):
    """Raised when credentials or environment configuration are missing."""
    pass


class SecretNotFoundError(MailClientError):
    """Raised when the API key secret cannot be found or has no usable value."""
    pass
