"""HTTP retrieval of a single CVE record from the NVD API.

All network I/O is isolated here — the rest of the package works with
in-memory bytes.
"""

import requests

from .errors import TransportError

NVD_CVE_API_URL = "https://services.nvd.nist.gov/rest/json/cve/1.0/{cve_id}"


def build_url(cve_id: str) -> str:
    """Substitute a canonical CVE ID into the lookup endpoint."""
    return NVD_CVE_API_URL.format(cve_id=cve_id)


def fetch_cve_record(cve_id: str, session: requests.Session | None = None) -> bytes:
    """Fetch the raw API response for one CVE ID.

    Issues one plain GET: no extra headers, no timeout override, no
    retry.  The HTTP status is not checked; callers judge the outcome
    from the payload.

    Args:
        cve_id: Canonical identifier, e.g. ``CVE-2021-34527``.
        session: Optional requests session.  A fresh one is opened and
            closed when omitted.

    Returns:
        The full response body.

    Raises:
        TransportError: On DNS, connection, TLS, or body-read failure.
    """
    url = build_url(cve_id)
    if session is None:
        with requests.Session() as s:
            return _get_body(s, url)
    return _get_body(session, url)


def _get_body(session: requests.Session, url: str) -> bytes:
    try:
        r = session.get(url)
        return r.content
    except requests.RequestException as e:
        raise TransportError("Failed to fetch data", cause=e) from e
