"""
Shared fixtures for DNSME client tests.
"""

import json

import pytest
import requests

from dnsme_client.constants import HEADER_REQUESTS_REMAINING


def make_response(status=200, remaining="100", body=None, url="https://api.sandbox.dnsmadeeasy.com/V1.2/"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    if remaining is not None:
        response.headers[HEADER_REQUESTS_REMAINING] = str(remaining)
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response.headers["Content-Type"] = "application/json"
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def response_factory():
    """Factory for fake API responses."""
    return make_response
