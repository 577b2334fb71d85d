# place_search/http_client.py
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Without a session every call is a plain requests.get, so concurrent
    calls from worker threads share no connection state. A caller-supplied
    Session is used as-is; share it across threads at your own risk.
    """

    def __init__(self, timeout_sec: int = 20, session: Optional[requests.Session] = None):
        self.timeout_sec = timeout_sec
        self.session = session

    def get(self, url: str) -> requests.Response:
        """Blocking GET of a fully built URL. Status codes are left to the caller."""
        logger.debug("GET %s", url.split("?", 1)[0])
        if self.session is None:
            return requests.get(url, timeout=self.timeout_sec)
        return self.session.get(url, timeout=self.timeout_sec)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
