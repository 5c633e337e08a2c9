"""Terminal table rendering using Jinja2 templates.

The template lives at ``cvelookup/templates/table.txt.j2``.  The label
column is padded to the widest label plus two spaces, followed by a
``|`` separator and the value.
"""

import sys
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import SeverityMetrics
from .parsers import CveRecord, decode_response, first_record

_TEMPLATES_DIR = Path(__file__).parent / "templates"

RAW_RESPONSE_LABEL = "Raw JSON Response:"
CELL_PADDING = 2


def table_rows(record: CveRecord) -> list[tuple[str, str]]:
    """Build the header, separator, and eight field rows for a record."""
    sev = record.severity if record.severity is not None else SeverityMetrics()
    return [
        ("Field", "Value"),
        ("-----", "-----"),
        ("CVE ID", record.cve_id),
        ("Description", record.description),
        ("Published Date", record.published_date),
        ("Base Score", f"{sev.base_score:f}"),
        ("Severity", sev.base_severity),
        ("Attack Vector", sev.attack_vector),
        ("Attack Complexity", sev.attack_complexity),
        ("CVSS", sev.vector_string),
    ]


def render_table(record: CveRecord) -> str:
    """Render a record as an aligned two-column text table.

    Args:
        record: The record to display.

    Returns:
        Table text, one row per line, with a trailing newline.
    """
    rows = table_rows(record)
    width = max(len(label) for label, _ in rows) + CELL_PADDING

    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(default_for_string=False, default=False),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("table.txt.j2")
    return template.render(rows=rows, width=width)


def echo_raw(body: bytes, out: TextIO) -> None:
    """Write the labelled raw body to ``out`` without altering its bytes.

    Streams backed by a binary buffer get the bytes as-is.  Pure text
    streams get them decoded with ``surrogateescape`` so undecodable
    bytes round-trip.
    """
    buf = getattr(out, "buffer", None)
    if buf is None:
        print(RAW_RESPONSE_LABEL, body.decode("utf-8", errors="surrogateescape"), file=out)
        return
    out.write(RAW_RESPONSE_LABEL + " ")
    out.flush()
    buf.write(body + b"\n")
    buf.flush()


def present(body: bytes, verbose: bool = False, out: TextIO | None = None, cve_id: str = "") -> str:
    """Decode a response body and write the table to ``out``.

    In verbose mode the raw body is echoed first, before any decoding,
    so it is visible even when decoding fails.

    Args:
        body: Raw response bytes from the fetcher.
        verbose: Echo the raw body before the table.
        out: Output stream, defaults to stdout.
        cve_id: Queried identifier, used in the not-found message.

    Returns:
        The rendered table text.

    Raises:
        DecodeError: If the body does not decode into the envelope.
        NotFoundError: If the envelope holds no items.
    """
    out = out if out is not None else sys.stdout
    if verbose:
        echo_raw(body, out)

    record = first_record(decode_response(body), cve_id)
    table = render_table(record)
    out.write(table)
    return table
