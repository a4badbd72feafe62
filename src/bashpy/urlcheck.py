# src/bashpy/urlcheck.py
"""
URL reachability check, the Python side of
``curl -s -o /dev/null -w '%{http_code}' --max-time 10 "$url"``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class UrlCheckResult:
    """Outcome of a single GET."""
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        # Exactly 200; other 2xx codes count as failures.
        return self.status_code == 200

    def summary(self) -> str:
        if self.ok:
            return f"OK {self.status_code}"
        if self.status_code is not None:
            return f"FAIL {self.status_code}"
        return f"FAIL {self.error}"


def check_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> UrlCheckResult:
    """GET ``url`` once and report the status or the network error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.info(f"GET {url} failed: {exc}")
        return UrlCheckResult(url=url, error=str(exc))

    status = response.status_code
    response.close()
    logger.info(f"GET {url} -> {status}")
    return UrlCheckResult(url=url, status_code=status)
