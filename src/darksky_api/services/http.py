"""
Shared HTTP session for talking to the Dark Sky API.

Provides a pre-configured ``requests.Session`` with a default timeout and a
package user agent. Requests are never retried: a failed call surfaces to
the caller on the first attempt.

Usage::

    from darksky_api.services.http import session

    resp = session.get("https://api.darksky.net/forecast/<key>/42,24")
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from darksky_api import __version__

#: Single attempt, no backoff; status codes are left to ``raise_for_status``.
NO_RETRY = Retry(total=0, read=False, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"darksky-api/{__version__}"


class TimeoutAdapter(HTTPAdapter):
    """Adapter that fills in ``timeout`` when a request is sent without one."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(**kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        # Session.request passes timeout=None when the caller gave none.
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """Build a ``requests.Session`` that sends each request once, with ``timeout``."""
    s = requests.Session()
    adapter = TimeoutAdapter(timeout, max_retries=NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, used when a client is not given one.
session: requests.Session = create_session()
