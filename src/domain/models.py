"""
Data models for the mail sending domain.

These type-safe data structures define clear contracts between components.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

import httpx


@dataclass(frozen=True)
class MailgunCredentials:
    """
    Credential pair identifying a Mailgun account.

    Attributes:
        domain: Sending domain registered with Mailgun (e.g., "mg.example.com")
        api_key: Private API key used as the Basic Auth password
    """
    domain: str = ''
    api_key: str = ''

    @property
    def is_complete(self) -> bool:
        """Check if both domain and API key are set."""
        return bool(self.domain and self.api_key)

    def __repr__(self) -> str:
        """Representation safe for logging (API key is never shown)."""
        masked = '***' if self.api_key else ''
        return f"MailgunCredentials(domain={self.domain!r}, api_key={masked!r})"


Callback = Callable[[Any], Any]


@dataclass
class SendOptions:
    """
    Optional callbacks for a single send.

    Attributes:
        success: Called with the httpx.Response on a 2xx response
        error: Called with the httpx.Response (non-2xx) or the transport exception
    """
    success: Optional[Callback] = None
    error: Optional[Callback] = None

    @classmethod
    def coerce(cls, options: Any) -> 'SendOptions':
        """
        Normalize caller options into a SendOptions instance.

        Accepts None, a SendOptions, a mapping with 'success'/'error' keys,
        or any object with 'success'/'error' attributes. Unknown keys and
        attributes are ignored.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(success=options.get('success'), error=options.get('error'))
        return cls(success=getattr(options, 'success', None), error=getattr(options, 'error', None))


@dataclass
class SendResult:
    """
    Result of a single send operation.

    This explicit result type makes success/failure handling clear
    and prevents exceptions from being used for control flow.

    Attributes:
        success: Whether the transport classified the request as successful
        response: Raw HTTP response (None if the transport itself failed)
        error: Transport exception (None if a response was received)
    """
    success: bool
    response: Optional[httpx.Response] = None
    error: Optional[Exception] = None

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status code, or None when no response was received."""
        return self.response.status_code if self.response is not None else None

    @property
    def failure_value(self) -> Any:
        """The object handed to the error callback on failure."""
        return self.response if self.response is not None else self.error

    @property
    def message_id(self) -> Optional[str]:
        """
        Mailgun message id from a successful JSON response body.

        Returns:
            The 'id' field (e.g., "<20250101.1@mg.example.com>") or None
        """
        if not self.success or self.response is None:
            return None
        try:
            body = self.response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get('id')
        return None

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return f"SendResult(success=True, status_code={self.status_code})"
        if self.response is not None:
            return f"SendResult(success=False, status_code={self.status_code})"
        return f"SendResult(success=False, error={self.error!r})"
