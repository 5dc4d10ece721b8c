"""
Unit tests for DNSME request signing.
"""

import datetime
import hashlib
import hmac
from email.utils import parsedate_to_datetime

import pytest
import requests

from dnsme_client import Authenticator, compute_hmac, request_date, sign_request
from dnsme_client.constants import HEADER_API_KEY, HEADER_HMAC, HEADER_REQUEST_DATE


FIXED_TIME = datetime.datetime(2006, 1, 2, 15, 4, 5, tzinfo=datetime.timezone.utc)


class TestRequestDate:
    """Test RFC 1123 date formatting."""

    def test_fixed_time(self):
        assert request_date(FIXED_TIME) == "Mon, 02 Jan 2006 15:04:05 GMT"

    def test_naive_time_is_utc(self):
        naive = datetime.datetime(2006, 1, 2, 15, 4, 5)
        assert request_date(naive) == "Mon, 02 Jan 2006 15:04:05 GMT"

    def test_other_timezone_converted(self):
        cet = datetime.timezone(datetime.timedelta(hours=1))
        local = datetime.datetime(2006, 1, 2, 16, 4, 5, tzinfo=cet)
        assert request_date(local) == "Mon, 02 Jan 2006 15:04:05 GMT"

    def test_default_is_now(self):
        before = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
        parsed = parsedate_to_datetime(request_date())
        after = datetime.datetime.now(datetime.timezone.utc)

        assert before <= parsed <= after


class TestComputeHMAC:
    """Test HMAC-SHA1 digest of the request date."""

    def test_matches_hmac_sha1(self):
        date = "Mon, 02 Jan 2006 15:04:05 GMT"
        expected = hmac.new(b"secret", date.encode("utf-8"), hashlib.sha1).hexdigest()

        assert compute_hmac("secret", date) == expected

    def test_hex_format(self):
        digest = compute_hmac("secret", "date")

        assert len(digest) == 40  # SHA1 hex = 40 chars
        assert digest == digest.lower()
        int(digest, 16)  # Should not raise

    def test_depends_on_key_and_date(self):
        base = compute_hmac("secret", "date")

        assert compute_hmac("other", "date") != base
        assert compute_hmac("secret", "other") != base


class TestSignRequest:
    """Test header attachment."""

    @pytest.fixture
    def prepared(self):
        return requests.Request("GET", "https://api.dnsmadeeasy.com/V1.2/domains/").prepare()

    def test_sets_headers_in_place(self, prepared):
        result = sign_request(prepared, "api-key", "secret", FIXED_TIME)

        assert result is prepared
        assert prepared.headers[HEADER_API_KEY] == "api-key"
        assert prepared.headers[HEADER_REQUEST_DATE] == "Mon, 02 Jan 2006 15:04:05 GMT"
        assert prepared.headers[HEADER_HMAC] == compute_hmac("secret", "Mon, 02 Jan 2006 15:04:05 GMT")
        assert prepared.headers["Accept"] == "application/json"

    def test_hmac_matches_date_header(self, prepared):
        sign_request(prepared, "api-key", "secret")

        date = prepared.headers[HEADER_REQUEST_DATE]
        assert prepared.headers[HEADER_HMAC] == compute_hmac("secret", date)

    def test_resign_replaces_headers(self, prepared):
        sign_request(prepared, "api-key", "secret", FIXED_TIME)
        later = FIXED_TIME + datetime.timedelta(seconds=30)
        sign_request(prepared, "api-key", "secret", later)

        assert prepared.headers[HEADER_REQUEST_DATE] == "Mon, 02 Jan 2006 15:04:35 GMT"

    def test_authenticator_uses_clock(self, prepared):
        auth = Authenticator("api-key", "secret", clock=lambda: FIXED_TIME)
        auth.sign(prepared)

        assert prepared.headers[HEADER_REQUEST_DATE] == "Mon, 02 Jan 2006 15:04:05 GMT"
        assert prepared.headers[HEADER_API_KEY] == "api-key"
