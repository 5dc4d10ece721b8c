"""
DNS Made Easy Client Library

A Python client for the DNS Made Easy REST API: HMAC-SHA1 signed requests,
typed domain and record models, and transparent retries while the account's
request quota is exhausted.

Example usage:
    from dnsme_client import DNSMEClient

    client = DNSMEClient("your-api-key", "your-secret-key")
    for record in client.get_domain_records("example.com"):
        print(record.name, record.type, record.data)
"""

from .client import DNSMEClient
from .auth import Authenticator, compute_hmac, request_date, sign_request
from .executor import RequestExecutor
from .ratelimit import DEFAULT_RATE_LIMIT_STATE, RateLimitState, parse_remaining
from .models import Domain, DomainList, Record
from .exceptions import (
    DNSMEClientError,
    ConfigurationError,
    HTTPError,
    APIStatusError,
    ForbiddenError,
    NotFoundError,
    APIError,
    InvalidResponseError
)
from .constants import (
    HEADER_API_KEY,
    HEADER_REQUEST_DATE,
    HEADER_HMAC,
    HEADER_REQUESTS_REMAINING,
    DNSME_API_URL,
    DNSME_SANDBOX_API_URL,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "DNSMEClient",
    "Authenticator",
    "compute_hmac",
    "request_date",
    "sign_request",
    "RequestExecutor",
    "RateLimitState",
    "DEFAULT_RATE_LIMIT_STATE",
    "parse_remaining",
    "Domain",
    "DomainList",
    "Record",
    "DNSMEClientError",
    "ConfigurationError",
    "HTTPError",
    "APIStatusError",
    "ForbiddenError",
    "NotFoundError",
    "APIError",
    "InvalidResponseError",
    "HEADER_API_KEY",
    "HEADER_REQUEST_DATE",
    "HEADER_HMAC",
    "HEADER_REQUESTS_REMAINING",
    "DNSME_API_URL",
    "DNSME_SANDBOX_API_URL",
    "DEFAULT_CONFIG"
]
