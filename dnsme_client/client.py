"""
DNS Made Easy API client.

This module provides domain and record CRUD on top of the signed,
rate-limit aware RequestExecutor.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from .auth import Authenticator
from .constants import ACCEPT_JSON, DEFAULT_CONFIG, DNSME_API_URL
from .exceptions import ConfigurationError, InvalidResponseError
from .executor import RequestExecutor
from .models import Domain, DomainList, Record
from .ratelimit import RateLimitState

logger = logging.getLogger(__name__)


class DNSMEClient:
    """
    Client for the DNS Made Easy REST API (v1.2).

    Every call is signed with the account's API and secret keys and retried
    while the provider reports an exhausted request quota.
    """

    def __init__(self, api_key: str, secret_key: str, base_url: str = DNSME_API_URL,
                 rate_limit_state: Optional[RateLimitState] = None, **config):
        """
        Initialize DNSME client.

        Args:
            api_key: DNSME API key
            secret_key: DNSME secret key
            base_url: API root, e.g. DNSME_SANDBOX_API_URL for testing
            rate_limit_state: Quota tracker (defaults to the process-wide one)
            **config: Configuration options (max_tries, cooldown, timeout,
                missing_quota_blocks)
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.secret_key = secret_key

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()
        self.executor = RequestExecutor(
            self.session,
            Authenticator(api_key, secret_key),
            state=rate_limit_state,
            max_tries=self.config['max_tries'],
            cooldown=self.config['cooldown'],
            timeout=self.config['timeout'],
            missing_quota_blocks=self.config['missing_quota_blocks']
        )

    def _validate_config(self):
        """Validate client configuration."""
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        if self.config['max_tries'] <= 0:
            raise ConfigurationError("max_tries must be positive")

        if self.config['cooldown'] < 0:
            raise ConfigurationError("cooldown cannot be negative")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def requests_remaining(self) -> int:
        """Request quota reported by the most recent response."""
        return self.executor.state.remaining

    def _make_request(self, method: str, path: str, json_data=None,
                      params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Build a request and run it through the executor.

        Args:
            method: HTTP method
            path: URL path (relative to base_url)
            json_data: JSON-serializable body
            params: Query string values

        Returns:
            requests.Response object
        """
        url = self.base_url + '/' + path.lstrip('/')

        headers = {'Accept': ACCEPT_JSON}
        data = None
        if json_data is not None:
            headers['Content-Type'] = ACCEPT_JSON
            data = json.dumps(json_data, separators=(',', ':')).encode('utf-8')

        request = requests.Request(method, url, headers=headers, data=data, params=params)
        return self.executor.execute(request)

    def _decode(self, response: requests.Response, expected=dict):
        """Decode a JSON body, requiring it to be of type ``expected``."""
        try:
            body = response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON in response (HTTP {response.status_code}): {e}"
            ) from e
        if not isinstance(body, expected):
            raise InvalidResponseError(
                f"Expected a JSON {expected.__name__}, got {type(body).__name__}"
            )
        return body

    def get_domain_list(self) -> DomainList:
        """List the names of all domains in the account."""
        response = self._make_request('GET', '/domains/')
        domains = DomainList.from_dict(self._decode(response))
        domains.raise_for_errors()
        return domains

    def get_domain_info(self, domain: str) -> Domain:
        """
        Fetch a single domain.

        Raises:
            NotFoundError: Domain does not exist
            APIError: Provider reported errors in the body
        """
        response = self._make_request('GET', f'/domains/{domain}')
        info = Domain.from_dict(self._decode(response))
        info.raise_for_errors()
        return info

    def add_domain(self, domain: Domain) -> Domain:
        """Create a domain; returns the domain as stored by DNSME."""
        response = self._make_request('PUT', f'/domains/{domain.name}', json_data=domain.to_dict())
        created = Domain.from_dict(self._decode(response))
        created.raise_for_errors()
        logger.info("Added domain %s", created.name or domain.name)
        return created

    def delete_domain(self, domain: str):
        """Delete a domain and all its records."""
        self._make_request('DELETE', f'/domains/{domain}')
        logger.info("Deleted domain %s", domain)

    def get_domain_record(self, domain: str, record_id) -> Record:
        """Fetch a single record of ``domain`` by id."""
        response = self._make_request('GET', f'/domains/{domain}/records/{record_id}')
        record = Record.from_dict(self._decode(response), domain)
        record.raise_for_errors()
        return record

    def get_domain_records(self, domain: str, params: Optional[Dict[str, Any]] = None) -> List[Record]:
        """
        List the records of a domain.

        Args:
            domain: Domain name
            params: Optional filters passed as query string, e.g. {'type': 'A'}

        Returns:
            List of records
        """
        response = self._make_request('GET', f'/domains/{domain}/records', params=params)
        body = self._decode(response, expected=list)
        if not all(isinstance(item, dict) for item in body):
            raise InvalidResponseError("Expected a list of record objects")
        return [Record.from_dict(item, domain) for item in body]

    def delete_domain_record(self, domain: str, record_id):
        """Delete a single record of ``domain``."""
        self._make_request('DELETE', f'/domains/{domain}/records/{record_id}')
        logger.info("Deleted record %s of %s", record_id, domain)

    def add_domain_record(self, domain: str, record: Record) -> Optional[Record]:
        """
        Add a record, or update it when it already has an id.

        Args:
            domain: Domain name
            record: Record to send

        Returns:
            The created record, or None for updates (DNSME answers those
            with an empty body)
        """
        if not record.id:
            response = self._make_request('POST', f'/domains/{domain}/records/',
                                          json_data=record.to_dict())
            created = Record.from_dict(self._decode(response), domain)
            created.raise_for_errors()
            logger.info("Added %s record %s to %s", created.type, created.name, domain)
            return created

        self._make_request('PUT', f'/domains/{domain}/records/{record.id}',
                           json_data=record.to_dict())
        logger.info("Updated record %s of %s", record.id, domain)
        return None

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
