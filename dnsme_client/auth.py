"""
Request signing for the DNS Made Easy API.

DNSME authenticates a request by recomputing HMAC-SHA1(secret, requestDate)
and rejecting dates too far from server time, so a request must be signed
right before it goes on the wire.
"""

import datetime
import hashlib
import hmac
from email.utils import format_datetime
from typing import Callable, Optional

import requests

from .constants import (
    ACCEPT_JSON,
    HEADER_API_KEY,
    HEADER_HMAC,
    HEADER_REQUEST_DATE
)


def request_date(now: Optional[datetime.datetime] = None) -> str:
    """
    Format a timestamp as an RFC 1123 HTTP date in UTC.

    Args:
        now: Timestamp to format (defaults to the current time)

    Returns:
        Date string such as ``Mon, 02 Jan 2006 15:04:05 GMT``
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(now.astimezone(datetime.timezone.utc), usegmt=True)


def compute_hmac(secret_key: str, date: str) -> str:
    """Return the lowercase hex HMAC-SHA1 of ``date`` keyed by ``secret_key``."""
    mac = hmac.new(
        secret_key.encode('utf-8'),
        date.encode('utf-8'),
        hashlib.sha1
    )
    return mac.hexdigest()


def sign_request(request: requests.PreparedRequest, api_key: str, secret_key: str,
                 now: Optional[datetime.datetime] = None) -> requests.PreparedRequest:
    """
    Attach DNSME authentication headers to ``request`` in place.

    Args:
        request: Unsent request (prepared or not)
        api_key: DNSME API key
        secret_key: DNSME secret key
        now: Timestamp to sign (defaults to the current time)

    Returns:
        The same request object
    """
    date = request_date(now)
    request.headers.update({
        HEADER_API_KEY: api_key,
        HEADER_REQUEST_DATE: date,
        HEADER_HMAC: compute_hmac(secret_key, date),
        'Accept': ACCEPT_JSON
    })
    return request


class Authenticator:
    """Holds static DNSME credentials and stamps outbound requests."""

    def __init__(self, api_key: str, secret_key: str,
                 clock: Optional[Callable[[], datetime.datetime]] = None):
        self.api_key = api_key
        self.secret_key = secret_key
        self.clock = clock

    def sign(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        now = self.clock() if self.clock else None
        return sign_request(request, self.api_key, self.secret_key, now)
