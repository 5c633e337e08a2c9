"""CVE identifier normalization and response decoding.

Pure functions — no I/O or network calls.  All inputs are in-memory
strings or bytes.
"""

from dataclasses import dataclass

from pydantic import ValidationError

from .errors import DecodeError, NotFoundError
from .models import ApiResponse, CveItem, SeverityMetrics

CVE_PREFIX = "CVE-"


@dataclass(frozen=True)
class CveRecord:
    """Normalized view of a single CVE item.

    Attributes:
        cve_id: Identifier echoed by the API.
        description: First description string, or empty string.
        published_date: Publication timestamp, displayed verbatim.
        severity: CVSS v3 metrics, or None if the record has no v3 block.
    """

    cve_id: str
    description: str
    published_date: str
    severity: SeverityMetrics | None = None


def normalize_cve_id(raw: str) -> str:
    """Ensure an identifier carries the ``CVE-`` prefix.

    The check is a literal, case-sensitive prefix test, so ``cve-2021-1``
    becomes ``CVE-cve-2021-1`` just as the database would treat it.

    Args:
        raw: Identifier as typed by the user, e.g. ``2021-34527``.

    Returns:
        Canonical identifier, e.g. ``CVE-2021-34527``.
    """
    if raw.startswith(CVE_PREFIX):
        return raw
    return CVE_PREFIX + raw


def decode_response(body: bytes) -> ApiResponse:
    """Decode a raw API response body into the envelope model.

    A literal ``null`` body decodes to an envelope with no items.

    Args:
        body: Raw response bytes.

    Returns:
        Validated ``ApiResponse``.

    Raises:
        DecodeError: If the body is not JSON or does not fit the envelope.
    """
    if body.strip() == b"null":
        return ApiResponse()
    try:
        return ApiResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError("Failed to decode response", cause=e) from e


def first_description(item: CveItem) -> str:
    data = item.cve.description.description_data
    if len(data) == 0:
        return ""
    return data[0].value


def to_record(item: CveItem) -> CveRecord:
    """Flatten a ``CveItem`` into a ``CveRecord``."""
    v3 = item.impact.base_metric_v3
    return CveRecord(
        cve_id=item.cve.data_meta.id,
        description=first_description(item),
        published_date=item.published_date,
        severity=v3.cvss_v3 if v3 is not None else None,
    )


def first_record(envelope: ApiResponse, cve_id: str = "") -> CveRecord:
    """Return the first item of the envelope as a ``CveRecord``.

    The endpoint is a single-record lookup, so anything past the first
    item is ignored.

    Args:
        envelope: Decoded API response.
        cve_id: Identifier that was queried, used in the error message.

    Returns:
        The normalized record.

    Raises:
        NotFoundError: If the envelope holds no items.
    """
    items = envelope.result.cve_items
    if len(items) == 0:
        msg = "No CVE data found for the given ID."
        if cve_id:
            msg = f"No CVE data found for the given ID ({cve_id})."
        raise NotFoundError(msg)
    return to_record(items[0])
