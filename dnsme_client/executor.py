"""
Request execution with DNSME rate-limit handling.

Every API call goes through RequestExecutor.execute(), which signs the
request, sends it, records the reported quota and, while the quota reads
zero, waits out a fixed cooldown before trying again.
"""

import enum
import logging
import time
from typing import Callable, Optional

import requests

from .auth import Authenticator
from .constants import DEFAULT_CONFIG, MSG_FORBIDDEN, MSG_NOT_FOUND
from .exceptions import ForbiddenError, HTTPError, NotFoundError
from .ratelimit import DEFAULT_RATE_LIMIT_STATE, RateLimitState

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    SENDING = "sending"
    COOLDOWN = "cooldown"
    DONE = "done"


class RequestExecutor:
    """
    Sends signed requests and retries them while DNSME reports no quota left.

    The loop is a small state machine:

        SENDING  --quota block-->            COOLDOWN
        SENDING  --transport error-->        DONE (raise)
        SENDING  --success-->                DONE
        COOLDOWN --attempts left-->          SENDING (after sleeping)
        COOLDOWN --attempts exhausted-->     DONE (last outcome)
    """

    def __init__(self, session: requests.Session, authenticator: Authenticator,
                 state: Optional[RateLimitState] = None,
                 max_tries: int = DEFAULT_CONFIG['max_tries'],
                 cooldown: float = DEFAULT_CONFIG['cooldown'],
                 timeout: float = DEFAULT_CONFIG['timeout'],
                 missing_quota_blocks: bool = DEFAULT_CONFIG['missing_quota_blocks'],
                 sleep: Callable[[float], None] = time.sleep):
        self.session = session
        self.authenticator = authenticator
        self.state = state if state is not None else DEFAULT_RATE_LIMIT_STATE
        self.max_tries = max_tries
        self.cooldown = cooldown
        self.timeout = timeout
        self.missing_quota_blocks = missing_quota_blocks
        self.sleep = sleep

    def execute(self, request: requests.Request) -> requests.Response:
        """
        Send ``request`` until it succeeds, fails terminally or runs out of tries.

        Args:
            request: Unsigned request; it is re-signed before every attempt

        Returns:
            The final response. After exhausting all attempts this is the
            last (still rate-limited) response.

        Raises:
            HTTPError: Transport failure not caused by an exhausted quota
            ForbiddenError: Final response is HTTP 403
            NotFoundError: Final response is HTTP 404
        """
        phase = Phase.SENDING
        attempt = 0
        response = None
        error = None

        while phase is not Phase.DONE:
            if phase is Phase.SENDING:
                attempt += 1
                response, error = self._send(request)
                if self._is_quota_block(response):
                    phase = Phase.COOLDOWN
                else:
                    phase = Phase.DONE
            elif phase is Phase.COOLDOWN:
                if attempt >= self.max_tries:
                    logger.error(
                        "API rate-limit still exceeded after %d tries, giving up",
                        self.max_tries
                    )
                    phase = Phase.DONE
                else:
                    logger.warning(
                        "API rate-limit exceeded, sleeping for %s seconds (try %d of %d)",
                        self.cooldown, attempt, self.max_tries
                    )
                    self.sleep(self.cooldown)
                    phase = Phase.SENDING

        if error is not None:
            raise HTTPError(f"HTTP request failed: {error}") from error

        return self._classify(response)

    def _send(self, request: requests.Request):
        """Sign and send one attempt, returning (response, transport error)."""
        prepared = self.session.prepare_request(request)
        self.authenticator.sign(prepared)

        # Picks up REQUESTS_CA_BUNDLE, proxies and session verify/cert
        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)

        logger.debug("%s %s", prepared.method, prepared.url)
        try:
            return self.session.send(prepared, timeout=self.timeout, **settings), None
        except requests.RequestException as e:
            return e.response, e

    def _is_quota_block(self, response: Optional[requests.Response]) -> bool:
        # Without a response there is no quota reading to act on
        if response is None:
            return False
        remaining = self.state.observe(response.headers, self.missing_quota_blocks)
        return remaining == 0

    def _classify(self, response: requests.Response) -> requests.Response:
        if response.status_code == 403:
            raise ForbiddenError(MSG_FORBIDDEN, response)
        if response.status_code == 404:
            raise NotFoundError(MSG_NOT_FOUND, response)
        return response
