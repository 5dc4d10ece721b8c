"""
Constants for the DNS Made Easy client library.
Header names and endpoints follow the DNSME REST API v1.2 documentation.
"""

# Request authentication headers
HEADER_API_KEY = "x-dnsme-apiKey"
HEADER_REQUEST_DATE = "x-dnsme-requestDate"
HEADER_HMAC = "x-dnsme-hmac"

# Response header carrying the remaining request quota
HEADER_REQUESTS_REMAINING = "x-dnsme-requestsRemaining"

ACCEPT_JSON = "application/json"

# API endpoints
DNSME_API_URL = "https://api.dnsmadeeasy.com/V1.2"
DNSME_SANDBOX_API_URL = "https://api.sandbox.dnsmadeeasy.com/V1.2"

# Default configuration values
DEFAULT_CONFIG = {
    'max_tries': 10,               # Attempts per request while rate-limited
    'cooldown': 30,                # Seconds to wait when quota is exhausted
    'timeout': 30,                 # HTTP timeout in seconds
    'missing_quota_blocks': True,  # Missing quota header counts as exhausted
}

# Fixed messages for terminal HTTP statuses
MSG_FORBIDDEN = "API access forbidden"
MSG_NOT_FOUND = "Not found"
