"""
Custom exceptions for the DNS Made Easy client library.
"""


class DNSMEClientError(Exception):
    """Base exception for DNSME client errors."""
    pass


class ConfigurationError(DNSMEClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(DNSMEClientError):
    """Raised when the HTTP transport fails (connection, timeout, ...)."""
    pass


class APIStatusError(DNSMEClientError):
    """Raised for HTTP statuses that must not be retried."""

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response


class ForbiddenError(APIStatusError):
    """Raised on HTTP 403."""
    pass


class NotFoundError(APIStatusError):
    """Raised on HTTP 404."""
    pass


class APIError(DNSMEClientError):
    """Raised when a response body carries a non-empty error list."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(" ".join(self.errors))


class InvalidResponseError(DNSMEClientError):
    """Raised when a response body cannot be decoded."""
    pass
