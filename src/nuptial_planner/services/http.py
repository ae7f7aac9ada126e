"""
Retrying HTTP session for the Open-Meteo weather collaborator.

A forecast must not hang on the weather API: requests get a default
timeout and a short retry budget on 429/5xx, after which
``fetch_hourly`` raises ``WeatherFetchError`` and the forecast runs on the
synthetic series instead.

Usage::

    from nuptial_planner.datasources.weather.client import HOURLY_VARS, OPEN_METEO_API
    from nuptial_planner.services.http import session

    resp = session.get(
        OPEN_METEO_API,
        params={"latitude": 45.5, "longitude": -122.6, "hourly": ",".join(HOURLY_VARS)},
    )
    resp.raise_for_status()

Tests pass their own policy, e.g. ``create_session(retry=Retry(total=0))``.
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nuptial_planner import __version__

#: Forecasts are interactive, so retries stay short before the synthetic fallback.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"nuptial-planner/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so a hung weather API can't stall a forecast
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Shared by every weather fetch.
session: requests.Session = create_session()
